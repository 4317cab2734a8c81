from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MemberNotFoundError(ValidationError):
    def __init__(self, member_id: Any) -> None:
        self.member_id = member_id
        super().__init__(f"교인을 찾을 수 없습니다 (id={member_id}).")


class ImportDataError(ValidationError):
    """Raised when an import payload is rejected. The roster is left untouched."""


class EmptyInputError(ImportDataError):
    def __init__(self) -> None:
        super().__init__("파일에 데이터가 없습니다.")


class NotAnArrayError(ImportDataError):
    def __init__(self) -> None:
        super().__init__("데이터 파일의 최상위 구조는 배열(Array)이어야 합니다.")


class ElementError(ImportDataError):
    """An element of the imported array failed a check.

    `index` is 1-based, as shown to the operator.
    """

    def __init__(self, index: int, message: str) -> None:
        self.index = index
        super().__init__(message)


class ElementNotObjectError(ElementError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"{index}번째 항목이 올바른 객체(Object)가 아닙니다.")


class MissingIdError(ElementError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"{index}번째 항목에 숫자 타입의 'id'가 없습니다.")


class MissingNameError(ElementError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"{index}번째 항목에 문자열 타입의 'name'이 없습니다.")


class InvalidPositionError(ElementError):
    def __init__(self, index: int, value: Any) -> None:
        self.value = value
        super().__init__(index, f"{index}번째 항목의 'position' 값이 유효하지 않습니다: {value}")


class MissingPhoneError(ElementError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"{index}번째 항목에 문자열 타입의 'phone'이 없습니다.")


class MissingAttendanceError(ElementError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"{index}번째 항목에 객체 타입의 'attendance'가 없습니다.")


class DuplicateIdError(ElementError):
    def __init__(self, index: int, member_id: Any) -> None:
        self.member_id = member_id
        super().__init__(index, f"{index}번째 항목의 'id' 값이 다른 항목과 중복됩니다: {member_id}")


class InvalidAttendanceEntryError(ImportDataError):
    def __init__(self, name: Any, date: Any, value: Any) -> None:
        self.name = name
        self.date = date
        self.value = value
        super().__init__(f"{name}님의 '{date}' 날짜의 출석 데이터('{value}')가 올바르지 않습니다.")


class MalformedJsonError(ImportDataError):
    def __init__(self) -> None:
        super().__init__("파일이 올바른 JSON 형식이 아닙니다. 텍스트 편집기에서 파일 내용을 확인해주세요.")


class FileReadError(ImportDataError):
    """Raised when file content cannot be read as text."""


class PersistenceWriteError(DomainError):
    """Raised by storage backends when saving fails.

    Non-fatal: the store logs it and keeps its in-memory state.
    """
