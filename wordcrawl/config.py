import os
import logging
from pathlib import Path

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def user_agent() -> str:
	return get_str_env("USER_AGENT", "WordCrawl/0.1")


def http_timeout_seconds() -> int:
	return get_int_env("HTTP_TIMEOUT", 10)


def grace_seconds() -> float:
	return get_float_env("WORDCRAWL_GRACE_SECONDS", 100.0)


def log_level() -> str:
	return (get_str_env("WORDCRAWL_LOG_LEVEL", "INFO") or "INFO").strip().upper()
