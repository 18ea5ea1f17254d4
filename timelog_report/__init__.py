"""GitLab timelog aggregation and reporting."""

__version__ = "1.0.0"
