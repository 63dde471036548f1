"""
Gunicorn configuration for production deployment
Run with: gunicorn jobspark.main:app -c gunicorn.conf.py
"""
import os

# Server socket
bind = f"0.0.0.0:{os.getenv('PORT', '5000')}"
backlog = 2048

# Worker processes
# Each worker holds its own MongoDB client pool (MONGODB_MAX_POOL_SIZE)
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 100

# Worker lifecycle
max_requests = 1000
max_requests_jitter = 100

# Timeouts
timeout = 30
keepalive = 5
graceful_timeout = 30

# Process naming
proc_name = "jobspark_api"

# Server mechanics
daemon = False  # Docker handles this
pidfile = None

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()


def when_ready(server):
    """Called just after the server is started."""
    server.log.info("JobSpark API ready, spawning workers")


def worker_int(worker):
    """Called when a worker receives the SIGINT or SIGQUIT signal."""
    worker.log.info("Worker received INT or QUIT signal")
