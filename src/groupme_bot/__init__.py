"""
GroupMe question bot (Lambda or standalone HTTP server).

Where: AWS Lambda via Function URL / EventBridge, or a container running server.py.
What:  Detect questions in group messages, reply with canned answers, post a weekly suggestion.
Why:   Tiny, dependency-light helper bot for a residential GroupMe group.
"""

__all__ = [
    "classifier",
    "config",
    "credentials",
    "dispatcher",
    "errors",
    "groupme",
    "handler",
    "replies",
    "server",
    "text",
]
