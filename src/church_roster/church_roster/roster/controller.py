from __future__ import annotations

import io
from functools import wraps

from flask import Flask, jsonify, request, send_file, session

from ..common.datetime_utils import today_local
from ..common.validators import require_int, require_year
from ..core.exceptions import DomainError, MemberNotFoundError, ValidationError
from ..container import Container
from ..members.model import Member
from ..members.selection import SelectionSet
from ..transfer.service import read_import_bytes
from ..views.calendar import calendar_view, month_grid
from ..views.filters import FilterState
from ..views.projector import counts_for_scope, filter_roster, member_stats, paginate, total_pages


def register(app: Flask, container: Container) -> None:
    def json_api(view):
        """Map domain errors to JSON responses; unexpected errors are logged as 500."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except MemberNotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except DomainError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                app.logger.exception("Unhandled error in %s", request.path)
                return jsonify({"success": False, "message": "시스템 오류가 발생했습니다."}), 500

        return wrapper

    # ---- session-scoped UI state ----

    def _filters() -> FilterState:
        return FilterState.from_dict(session.get("filters"), today=today_local())

    def _save_filters(state: FilterState) -> None:
        session["filters"] = state.to_dict()

    def _selection() -> SelectionSet:
        return SelectionSet(session.get("selected_ids", []))

    def _save_selection(selection: SelectionSet) -> None:
        session["selected_ids"] = selection.to_list()

    def _json_body() -> dict:
        return request.get_json(silent=True) or {}

    def _member_json(m: Member, selection: SelectionSet | None = None, viewing_date: str | None = None) -> dict:
        data = m.to_dict()
        if viewing_date is not None:
            data["status"] = m.attendance.get(viewing_date)
        if selection is not None:
            data["selected"] = m.id in selection
        return data

    def _current_view(state: FilterState) -> tuple[FilterState, list[Member], int]:
        members = container.store.members
        filtered = filter_roster(members, state.position, state.status, state.viewing_date)
        pages = total_pages(len(filtered))
        state = state.clamp_page(pages)
        return state, paginate(filtered, state.page), len(filtered)

    # ---- roster ----

    @app.route("/api/members", methods=["GET"], endpoint="members_list")
    @json_api
    def members_list():
        args = request.args
        state = _filters().update(
            position=args.get("position"),
            status=args.get("status"),
            viewing_date=args.get("date"),
            page=require_int(args["page"], "페이지") if args.get("page") else None,
        )
        state, page_items, filtered_count = _current_view(state)
        _save_filters(state)

        selection = _selection()
        counts = counts_for_scope(container.store.members, state.position, state.viewing_date)
        today = today_local().isoformat()

        return jsonify(
            {
                "success": True,
                "filters": state.to_dict(),
                "attendance_header": "금일 출결" if state.viewing_date == today else "선택일 출결",
                "counts": {"total": counts.total, "present": counts.present, "absent": counts.absent},
                "filtered_count": filtered_count,
                "total_pages": total_pages(filtered_count),
                "page_all_selected": selection.all_selected([m.id for m in page_items]),
                "selected_count": len(selection),
                "members": [_member_json(m, selection, state.viewing_date) for m in page_items],
                "last_saved_at": container.store.last_saved_at.isoformat() if container.store.last_saved_at else None,
            }
        )

    @app.route("/api/members", methods=["POST"], endpoint="members_create")
    @json_api
    def members_create():
        data = _json_body()
        member = container.member_service.add_member(
            name=str(data.get("name") or ""),
            position=str(data.get("position") or ""),
            phone=str(data.get("phone") or ""),
        )
        return jsonify({"success": True, "member": _member_json(member)}), 201

    @app.route("/api/members/<int:member_id>", methods=["PUT"], endpoint="members_update")
    @json_api
    def members_update(member_id: int):
        data = _json_body()
        member = container.member_service.edit_member(
            member_id,
            name=str(data.get("name") or ""),
            position=str(data.get("position") or ""),
            phone=str(data.get("phone") or ""),
        )
        return jsonify({"success": True, "member": _member_json(member)})

    @app.route("/api/members/<int:member_id>", methods=["DELETE"], endpoint="members_delete")
    @json_api
    def members_delete(member_id: int):
        selection = _selection()
        container.member_service.delete_member(member_id, selection=selection)
        _save_selection(selection)
        return jsonify({"success": True})

    @app.route("/api/members/<int:member_id>/attendance", methods=["PUT"], endpoint="members_attendance")
    @json_api
    def members_attendance(member_id: int):
        data = _json_body()
        date_key = str(data.get("date") or _filters().viewing_date)
        status = str(data.get("status") or "")
        if data.get("toggle"):
            member = container.member_service.toggle_attendance(member_id, date_key=date_key, status=status)
        else:
            member = container.member_service.mark_attendance(member_id, date_key=date_key, status=status)
        return jsonify({"success": True, "member": _member_json(member, viewing_date=date_key)})

    @app.route("/api/members/<int:member_id>/stats", methods=["GET"], endpoint="members_stats")
    @json_api
    def members_stats(member_id: int):
        member = container.member_service.get(member_id)
        today = today_local()
        year = require_year(request.args["year"]) if request.args.get("year") else today.year
        month = require_int(request.args["month"], "월") if request.args.get("month") else today.month
        if not 1 <= month <= 12:
            raise ValidationError(f"월 값이 올바르지 않습니다: {month}")

        stats = member_stats(member, year, month)
        grid = [
            None if d is None else {"date": d.isoformat(), "day": d.day, "status": member.attendance.get(d.isoformat())}
            for d in month_grid(year, month)
        ]
        return jsonify(
            {
                "success": True,
                "member": _member_json(member),
                "year": year,
                "month": month,
                "stats": {
                    "present_month": stats.present_month,
                    "total_month": stats.total_month,
                    "month_rate": stats.month_rate,
                    "present_year": stats.present_year,
                    "total_year": stats.total_year,
                    "year_rate": stats.year_rate,
                },
                "calendar": grid,
            }
        )

    # ---- calendar / filters ----

    @app.route("/api/calendar", methods=["GET"], endpoint="calendar")
    @json_api
    def calendar():
        state = _filters()
        if request.args.get("date"):
            state = state.select_date(request.args["date"])
        if request.args.get("year"):
            state = state.update(year=require_year(request.args["year"]))
        _save_filters(state)
        return jsonify(
            {
                "success": True,
                "year": state.year,
                "selected_date": state.viewing_date,
                "months": calendar_view(state.year, state.viewing_date, today_local()),
            }
        )

    @app.route("/api/filters/reset", methods=["POST"], endpoint="filters_reset")
    @json_api
    def filters_reset():
        state = _filters().reset(today_local())
        _save_filters(state)
        return jsonify({"success": True, "filters": state.to_dict()})

    # ---- selection / bulk message ----

    @app.route("/api/selection/toggle", methods=["POST"], endpoint="selection_toggle")
    @json_api
    def selection_toggle():
        member = container.member_service.get(require_int(_json_body().get("id"), "id"))
        selection = _selection()
        selected = selection.toggle(member.id)
        _save_selection(selection)
        return jsonify({"success": True, "selected": selected, "selected_ids": selection.to_list()})

    @app.route("/api/selection/page", methods=["POST"], endpoint="selection_page")
    @json_api
    def selection_page():
        _, page_items, _ = _current_view(_filters())
        selection = _selection()
        selection.toggle_page([m.id for m in page_items])
        _save_selection(selection)
        return jsonify({"success": True, "selected_ids": selection.to_list()})

    @app.route("/api/selection/clear", methods=["POST"], endpoint="selection_clear")
    @json_api
    def selection_clear():
        selection = _selection()
        selection.clear()
        _save_selection(selection)
        return jsonify({"success": True, "selected_ids": []})

    @app.route("/api/selection/sms", methods=["POST"], endpoint="selection_sms")
    @json_api
    def selection_sms():
        uri = container.notification_service.send_bulk(_selection())
        return jsonify({"success": True, "uri": uri})

    # ---- import / export ----

    @app.route("/api/export", methods=["GET"], endpoint="export")
    @json_api
    def export():
        bundle = container.transfer_service.export_roster(today=today_local())
        if request.args.get("format") == "json":
            return jsonify(
                {
                    "success": True,
                    "filename": bundle.filename,
                    "content": bundle.content,
                    "clipboard_copied": bundle.clipboard_copied,
                    "message": bundle.message,
                    "band_url": bundle.band_url,
                }
            )
        return send_file(
            io.BytesIO(bundle.content.encode("utf-8")),
            mimetype="application/json",
            as_attachment=True,
            download_name=bundle.filename,
        )

    @app.route("/api/import", methods=["POST"], endpoint="import")
    @json_api
    def import_roster():
        upload = request.files.get("file")
        if upload is None:
            return jsonify({"success": False, "message": "가져올 파일을 선택해주세요."}), 400

        text = read_import_bytes(upload.read())
        confirmed = request.form.get("confirm") in {"1", "true", "yes"}
        preview = container.transfer_service.import_text(text, confirmed=confirmed)

        if not confirmed:
            return jsonify(
                {
                    "success": True,
                    "applied": False,
                    "count": preview.count,
                    "message": preview.confirmation_message,
                }
            )

        state = _filters().reset(today_local())
        _save_filters(state)
        _save_selection(SelectionSet())
        return jsonify(
            {
                "success": True,
                "applied": True,
                "count": preview.count,
                "message": f"✅ 성공적으로 {preview.count}명의 데이터를 가져왔습니다! 화면이 초기화됩니다.",
                "filters": state.to_dict(),
            }
        )
