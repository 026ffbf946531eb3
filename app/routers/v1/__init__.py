"""v1 router package — all /api/v1/* endpoints live here.

Files:
  jobs.py   — Job CRUD (public reads, admin-only writes)
  admin.py  — /admin-check token probe

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
