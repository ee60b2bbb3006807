"""
Gunicorn configuration for production deployment.
Usage: gunicorn wsgi:app -c gunicorn.conf.py
"""

import os

# ── Server socket ─────────────────────────────────────────────────────────
bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"

# ── Workers ───────────────────────────────────────────────────────────────
# Every worker opens the same SQLite file; keep one process and scale threads.
workers = int(os.environ.get("WEB_CONCURRENCY", 1))
worker_class = "gthread"
threads = int(os.environ.get("THREADS", 4))

# ── Timeouts ──────────────────────────────────────────────────────────────
timeout = 120
graceful_timeout = 30
keepalive = 5

# ── Logging ───────────────────────────────────────────────────────────────
accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)sμs'

# ── Security ──────────────────────────────────────────────────────────────
limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190

# ── Process naming ────────────────────────────────────────────────────────
proc_name = "habit-lists"

# ── Server hooks ──────────────────────────────────────────────────────────
def on_starting(server):
    # Create and seed the database once, before any worker forks
    from habitlists import config
    from habitlists.seed import open_store

    server.log.info("Habit Lists starting...")
    open_store(config.DB_PATH, seed=config.SEED_SAMPLE_DATA).close()

def when_ready(server):
    server.log.info("Server ready. Listening on %s", bind)

def worker_exit(server, worker):
    server.log.info("Worker %s exited", worker.pid)
