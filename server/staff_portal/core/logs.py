import logging

_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Append the ``extra={...}`` context of a record as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {key: value for key, value in vars(record).items() if key not in _RESERVED}
        if context:
            line = f"{line} " + " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return line


def configure_logging(level: str = "INFO") -> None:
    # No timestamps: CloudWatch records the ingestion time itself.
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s %(name)s %(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
