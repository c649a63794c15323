#!/usr/bin/env python3
# Repl.py - fileshell prompt loop, script mode and completion
import glob
import logging
import os
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.completion import Completer, Completion

import argparser
import commands
import tokenizer
import validator

log = logging.getLogger(__name__)

def prompt():
    return f"fileshell:{os.getcwd()}> "

def print_banner():
    print("Custom Command Language Interpreter")
    print("Supported commands:")
    for kind in validator.COMMAND_SHAPES:
        line = validator.usage(kind)
        if kind == "exit":
            line += " (to end the session)"
        print(f"- {line}")


class ShellCompleter(Completer):
    """Suggest the next word of a command from the shape table.

    Keywords for the first word, the fixed markers ('file', 'to') where a
    shape expects them, and file names from the working directory for
    operand slots.
    """

    def get_completions(self, document, complete_event):
        before = document.text_before_cursor
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        word_len = len(word_before_cursor)

        words = before.split()
        index = len(words) if (not before or before[-1].isspace()) else len(words) - 1

        # 1. First word: command keywords
        if index == 0:
            for name in sorted(validator.COMMAND_SHAPES):
                if name.startswith(word_before_cursor):
                    yield Completion(name, -word_len)
            return

        shape = validator.COMMAND_SHAPES.get(words[0])
        if shape is None or index - 1 >= len(shape.slots):
            return
        slot = shape.slots[index - 1]

        # 2. Fixed markers
        if not slot.is_operand:
            if slot.literal.startswith(word_before_cursor):
                yield Completion(slot.literal, -word_len)
            return

        # 3. Operand slots: file names the tokenizer reads back as one word
        for path in sorted(glob.glob(glob.escape(word_before_cursor) + "*")):
            if os.path.isfile(path) and tokenizer.WORD_RE.fullmatch(path):
                yield Completion(path, -word_len)

# -----------------------
# Line processor
# -----------------------
def process_line(line: str, options):
    """Tokenize, validate and execute one line.

    Returns None for blank lines, False for a rejected command, otherwise
    whatever the file action returned.
    """
    if not line or not line.strip():
        return None
    if line.strip().lower() == "exit":
        return commands.exit_session()

    tokens = tokenizer.tokenize(line)
    if options.show_tokens:
        print(f"Tokens: {tokenizer.format_tokens(tokens)}")

    try:
        command = validator.validate(tokens, strict=options.strict_exit)
    except validator.CommandSyntaxError as e:
        log.debug("rejected %r: %s", line, e.reason)
        print(f"Syntax Analysis: Invalid command: {e.reason}")
        return False

    print("Syntax Analysis: Valid command")
    return commands.execute(command)

# -----------------------
# Script mode runner
# -----------------------
def run_script(path: str, options):
    if not os.path.exists(path):
        print(f"Script not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            l = line.rstrip("\n")
            if not l or l.strip().startswith("#"):
                continue
            process_line(l, options)
    return 0

# -----------------------
# Main loop
# -----------------------
def main(argv=None):
    options = argparser.build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, options.log_level, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    if options.command is not None:
        process_line(options.command, options)
        return 0
    if options.script:
        return run_script(options.script, options)

    print_banner()
    session = PromptSession(history=InMemoryHistory(), completer=ShellCompleter())
    while True:
        try:
            line = session.prompt(prompt())
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print("\nSession ended. Goodbye!")
            break
        try:
            process_line(line, options)
        except Exception as e:
            print(f"Runtime error: {e}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
