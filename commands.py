#!/usr/bin/env python3
# commands.py - file actions for fileshell

import logging
import os
import shutil
import sys

log = logging.getLogger(__name__)

# -----------------------
# File actions
# Each action takes plain filename strings and reports its own errors.
# Returns True on success, False when the OS refused.
# -----------------------
def create_file(path):
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as e:
        print(f"Error creating file: {e}")
        return False
    print(f"File created: {path}")
    return True

def delete_file(path):
    if os.path.isdir(path):
        print(f"Error deleting file: {path} is a directory")
        return False
    try:
        os.remove(path)
    except FileNotFoundError:
        print(f"Error deleting file: {path}: No such file or directory")
        return False
    except OSError as e:
        print(f"Error deleting file: {e}")
        return False
    print(f"File deleted: {path}")
    return True

def copy_file(source, destination):
    try:
        shutil.copyfile(source, destination)
    except FileNotFoundError:
        print(f"Error copying file: {source}: No such file or directory")
        return False
    except (OSError, shutil.Error) as e:
        print(f"Error copying file: {e}")
        return False
    print(f"File copied from {source} to {destination}")
    return True

def rename_file(old_name, new_name):
    if not os.path.isfile(old_name):
        print(f"Error renaming file: {old_name}: No such file")
        return False
    try:
        os.replace(old_name, new_name)
    except OSError as e:
        print(f"Error renaming file: {e}")
        return False
    print(f"File renamed from {old_name} to {new_name}")
    return True

def exit_session():
    print("Session ended. Goodbye!")
    sys.exit(0)

COMMANDS = {
    "create": create_file,
    "delete": delete_file,
    "copy": copy_file,
    "rename": rename_file,
    "exit": exit_session,
}

def execute(command):
    """Run the action for a validated Command, passing its operands positionally."""
    action = COMMANDS.get(command.kind)
    if action is None:
        # only reachable if COMMAND_SHAPES grew without a matching action
        raise KeyError(f"no action registered for '{command.kind}'")
    log.debug("dispatching %s%r", command.kind, command.operands)
    return action(*command.operands)
