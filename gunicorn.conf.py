import os

from wedding_planner.core.config import settings

bind = f"0.0.0.0:{settings.PORT}"
workers = int(os.getenv('WEB_CONCURRENCY', 1))
worker_class = "uvicorn.workers.UvicornWorker"
wsgi_app = "wedding_planner.main:app"
worker_connections = 1000
max_requests = 1000
max_requests_jitter = 100
preload_app = True
