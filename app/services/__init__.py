"""Services package — all business logic lives here, never in routers.

Files:
  job.py  — Job CRUD rules; turns missing records into NotFoundError

Rule: routers call services, services call repositories, repositories own the store.
      No FastAPI imports in services.
"""
