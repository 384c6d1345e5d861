"""
Logging configuration for the PlayMusic API using eliot.

This module provides structured logging for the stores and routes using eliot,
which gives every file write and store mutation an action context that can be
followed through the JSON log file.
"""

import eliot
import logging
import sys
from eliot import log_message, write_traceback
from eliot.stdlib import EliotHandler
from pathlib import Path


class HumanReadableDestination:
    """Destination that formats logs in a human-readable format."""

    def __init__(self, file):
        self.file = file

    def __call__(self, message):
        """Format and write log message."""
        # Skip internal eliot action start/finish messages
        if message.get("action_type") and not message.get("message_type"):
            return

        msg_type = message.get("message_type", "")

        if msg_type == "api_request":
            output = f"[API] {message.get('action', '')}"
            if message.get("description"):
                output += f": {message['description']}"

        elif msg_type == "store_operation":
            output = f"[{message.get('collection', 'store').upper()}] {message.get('operation', '')}"
            if message.get("record_id"):
                output += f" {message['record_id']}"

        elif msg_type == "file_operation":
            output = f"[FILE] {message.get('operation', '')} {message.get('filepath', '')}"
            if "records" in message:
                output += f" ({message['records']} records)"

        elif msg_type == "error_occurred":
            output = f"[ERROR] {message.get('error_type', '')}: {message.get('error_message', '')}"

        elif "message" in message:
            output = message["message"]

        else:
            return

        if output and output.strip():
            self.file.write(output + "\n")
            self.file.flush()


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """
    Set up eliot logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to (always logs to stdout as well)
    """
    eliot.add_destination(HumanReadableDestination(sys.stdout))

    # Raw JSON for machine parsing
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        eliot.to_file(open(log_path, "a"))

    # Route stdlib logging (uvicorn, fastapi) into eliot
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.addHandler(EliotHandler())

    log_message(
        message_type="logging_setup", log_level=log_level, log_file=log_file or "stdout", message="Eliot logging configured"
    )


def log_file_operation(operation: str, filepath: str | Path, **context):
    """
    Log file operations with context.

    Args:
        operation: File operation type (read, write, seed, etc.)
        filepath: Path to the file
        **context: Additional context data
    """
    log_message(message_type="file_operation", operation=operation, filepath=str(filepath), **context)


def log_store_operation(operation: str, collection: str, **context):
    """
    Log store mutations with context.

    Args:
        operation: Store operation (create, delete, load)
        collection: Collection name ("tracks" or "videos")
        **context: Additional context data
    """
    log_message(message_type="store_operation", operation=operation, collection=collection, **context)


def log_api_request(action: str, trigger_source: str = "api", **context):
    """
    Log API requests with context.

    Args:
        action: API action being performed
        trigger_source: Source of the request (default: "api")
        **context: Additional context data (request parameters, response, etc.)
    """
    log_message(message_type="api_request", action=action, trigger_source=trigger_source, **context)


def log_error(error: Exception, **context):
    """
    Log errors with full context and traceback.

    Must be called from inside an ``except`` block so the traceback is available.

    Args:
        error: Exception that occurred
        **context: Additional context data
    """
    write_traceback(exc_info=sys.exc_info())
    log_message(message_type="error_occurred", error_message=str(error), error_type=type(error).__name__, **context)
