"""Church Roster package.

Weekly attendance tracking for a church roster. Organized by feature modules
(members, views, transfer, messaging, ...) behind a thin Flask controller
layer, with the roster persisted through a pluggable key-value store.
"""
