"""
Gunicorn configuration for promocal.
All settings are driven from environment variables for container deployment.

The calendar cache lives in each worker process: every worker keeps its own
copy and the admin "clear cache" call only reaches the worker that served it
unless GUNICORN_WORKERS=1.
"""

from __future__ import annotations

import logging
import multiprocessing
import os

# ===== Server Binding =====
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8000")
backlog = int(os.environ.get("GUNICORN_BACKLOG", "2048"))

# ===== Worker Settings =====
# gthread: threads share one process-wide calendar cache per worker
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = int(os.environ.get("GUNICORN_WORKERS", str(min(multiprocessing.cpu_count(), 2))))
threads = int(os.environ.get("GUNICORN_THREADS", "8"))
max_requests = int(os.environ.get("GUNICORN_MAX_REQUESTS", "10000"))
max_requests_jitter = int(os.environ.get("GUNICORN_MAX_REQUESTS_JITTER", "1000"))

# ===== Timeouts =====
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.environ.get("GUNICORN_KEEPALIVE", "5"))

# ===== Logging =====
accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
capture_output = True
access_log_format = os.environ.get(
    "GUNICORN_ACCESS_LOG_FORMAT",
    '{"timestamp": "%(t)s", "remote": "%(h)s", "request": "%(r)s", '
    '"status": %(s)s, "bytes": %(b)s, "response_time": %(D)s, "pid": %(p)s}',
)

# ===== Server Mechanics =====
preload_app = os.environ.get("GUNICORN_PRELOAD", "false").lower() in ("1", "true", "yes")
forwarded_allow_ips = os.environ.get("GUNICORN_FORWARDED_ALLOW_IPS", "*")
proc_name = os.environ.get("GUNICORN_PROC_NAME", "promocal")
wsgi_app = "promocal.wsgi:app"


def when_ready(server):
    logging.getLogger(__name__).info(
        f"Gunicorn ready on {bind}: workers={workers}, threads={threads}, worker_class={worker_class}"
    )


def worker_abort(worker):
    logging.getLogger(__name__).warning(f"Worker {worker.pid} timed out (>{timeout}s), aborting")
