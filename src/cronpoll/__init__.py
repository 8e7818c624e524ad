"""cronpoll: poll an IP echo service on a cron schedule and serve /hello."""

__version__ = "1.0.0"
