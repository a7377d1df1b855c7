# Gunicorn settings for serving the blog engine
#   gunicorn -c gunicorn.conf.py "blogengine:create_app()"
# Every value can be overridden from the environment, like blogengine.config.

import os

bind = os.getenv("BLOG_BIND", "127.0.0.1:8000")

workers = int(os.getenv("BLOG_WORKERS", "2"))
worker_class = "gthread"
threads = int(os.getenv("BLOG_THREADS", "4"))
timeout = int(os.getenv("BLOG_WORKER_TIMEOUT", "30"))

max_requests = int(os.getenv("BLOG_MAX_REQUESTS", "0"))

# stderr by default, alongside the app log
accesslog = os.getenv("BLOG_ACCESS_LOG", "-")
errorlog = os.getenv("BLOG_ERROR_LOG", "-")
loglevel = os.getenv("BLOG_LOG_LEVEL", "info")
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(D)s "%({x-request-id}i)s"'
