# argparser.py - launcher options for fileshell
import argparse
import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _env_flag(name):
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")

def build_parser():
    parser = argparse.ArgumentParser(
        prog="fileshell",
        description="Interpreter for create/delete/copy/rename file commands.",
    )
    parser.add_argument("script", nargs="?",
                        help="run commands from this file instead of prompting")
    parser.add_argument("-c", "--command", metavar="LINE",
                        help="run a single command line and return")
    parser.add_argument("--strict-exit", action="store_true", default=_env_flag("FILESHELL_STRICT_EXIT"),
                        help="reject trailing words after 'exit'")
    parser.add_argument("--show-tokens", action="store_true", default=_env_flag("FILESHELL_SHOW_TOKENS"),
                        help="print the token sequence of every line")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=os.environ.get("FILESHELL_LOG_LEVEL", "WARNING").upper(),
                        help="diagnostic log level (default: %(default)s)")
    return parser
