"""
Server-side services.

Business rules shared by the API routers: authentication dependencies,
questionnaire scoring, report rendering and storage, messaging permissions
and calendar windows.
"""
