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


def user_agent() -> str:
	return get_str_env("WORDCRAWL_USER_AGENT", "wordcrawl/0.1")


def parse_timeout_seconds() -> int:
	return get_int_env("WORDCRAWL_PARSE_TIMEOUT", 10)


def log_level() -> str:
	return get_str_env("WORDCRAWL_LOG_LEVEL", "INFO").strip().upper()
