from __future__ import annotations
import logging
import re

# httpx logs the full request URL, query string included
CREDENTIAL_RE = re.compile(r"((?:app_id|app_key)=)([^&\s\"']+)", re.IGNORECASE)


def _mask(text: str) -> str:
    return CREDENTIAL_RE.sub(r"\1***", text)


class SecretMask(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = _mask(record.msg)
        if record.args and isinstance(record.args, tuple):
            args = []
            for a in record.args:
                if isinstance(a, str):
                    a = _mask(a)
                elif a is not None and not isinstance(a, (int, float)):
                    # httpx passes the URL object itself
                    text = str(a)
                    masked = _mask(text)
                    if masked != text:
                        a = masked
                args.append(a)
            record.args = tuple(args)
        return True


def setup_logger(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # clear handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)

    h = logging.StreamHandler()
    f = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    h.setFormatter(f)
    h.addFilter(SecretMask())
    logger.addHandler(h)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return logger
