#!/usr/bin/env python3
"""
run_validator.py

End-to-end validator that drives fileshell (Repl.py) in script mode and
checks expected outputs. Save alongside Repl.py and run:

    python run_validator.py

Results go to shell_test_results.txt and are printed to the console.
Each check writes its command lines to a temporary script and runs
"<python> Repl.py <scriptfile>", which is fileshell's non-interactive mode.
"""
import os
import subprocess
import sys
import tempfile

HERE = os.path.dirname(os.path.abspath(__file__))

# Command to run the shell.
SHELL_CMD = [sys.executable, os.path.join(HERE, "Repl.py")]

# Output result file
RESULT_FILE = "shell_test_results.txt"

# Generic runner: write a script (list of lines), run the shell, return stdout+stderr
def run_script(lines, extra_args=(), timeout=20):
    fd, path = tempfile.mkstemp(prefix="validator_", suffix=".fsh", text=True)
    os.close(fd)
    with open(path, "w", encoding="utf-8") as f:
        for L in lines:
            f.write(L.rstrip() + "\n")
    try:
        proc = subprocess.run(SHELL_CMD + list(extra_args) + [path],
                              capture_output=True, text=True, timeout=timeout)
        out = proc.stdout or ""
        err = proc.stderr or ""
        combined = (out + ("\n" + err if err else "")).strip()
    except subprocess.TimeoutExpired:
        combined = "<TIMEOUT>"
    finally:
        try:
            os.remove(path)
        except OSError:
            pass
    return combined

# Helper: write result to result file and also print
def write_result(fobj, name, ok, details):
    fobj.write(f"TEST: {name}\n")
    fobj.write(f"RESULT: {'PASS' if ok else 'FAIL'}\n")
    fobj.write("OUTPUT:\n")
    fobj.write(details + "\n")
    fobj.write("-" * 60 + "\n")
    fobj.flush()
    print(f"{name}: {'PASS' if ok else 'FAIL'}")
    return ok

# Clean previous artifacts used by checks
def cleanup():
    for name in ("a_test.txt", "b_test.txt", "c_test.txt"):
        try:
            if os.path.exists(name):
                os.remove(name)
        except OSError:
            pass

def main():
    cleanup()
    results = []
    with open(RESULT_FILE, "w", encoding="utf-8") as f:
        f.write("fileshell validator run\n")
        f.write("Command: " + " ".join(SHELL_CMD) + "\n")
        f.write("=" * 60 + "\n\n")

        # 1) create / delete
        out = run_script(["create file a_test.txt", "delete file a_test.txt"])
        ok = "File created: a_test.txt" in out and "File deleted: a_test.txt" in out
        results.append(write_result(f, "create/delete", ok, out))

        # 2) copy / rename
        script = [
            "create file a_test.txt",
            "copy file a_test.txt to b_test.txt",
            "rename file b_test.txt to c_test.txt",
            "delete file a_test.txt",
            "delete file c_test.txt",
        ]
        out = run_script(script)
        ok = ("File copied from a_test.txt to b_test.txt" in out
              and "File renamed from b_test.txt to c_test.txt" in out
              and "Error" not in out)
        results.append(write_result(f, "copy/rename", ok, out))

        # 3) syntax errors keep the session alive
        script = [
            "create report.txt",
            "launch file a_test.txt",
            "copy file a_test.txt to",
            "create file a_test.txt",
            "delete file a_test.txt",
        ]
        out = run_script(script)
        ok = ("expected 'file' marker" in out and "unknown command 'launch'" in out
              and "found end of input" in out and "File deleted: a_test.txt" in out)
        results.append(write_result(f, "syntax errors", ok, out))

        # 4) exit stops the script
        out = run_script(["exit", "create file a_test.txt"])
        ok = "Goodbye" in out and "File created" not in out
        results.append(write_result(f, "exit", ok, out))
        cleanup()

        # 5) strict exit policy
        out = run_script(["exit now", "create file a_test.txt", "delete file a_test.txt"],
                         extra_args=["--strict-exit"])
        ok = "unexpected 'now' after command" in out and "File deleted: a_test.txt" in out
        results.append(write_result(f, "strict exit", ok, out))

        # 6) token echo
        out = run_script(["copy file a_test.txt to b_test.txt"], extra_args=["--show-tokens"])
        ok = ("Tokens: [Keyword(copy), Filename(file), Filename(a_test.txt), "
              "Connector(to), Filename(b_test.txt), EndOfInput]") in out
        results.append(write_result(f, "show tokens", ok, out))

        # 7) missing source file is reported, not fatal
        out = run_script(["delete file a_test.txt", "exit"])
        ok = "Error deleting file" in out and "Goodbye" in out
        results.append(write_result(f, "missing file", ok, out))

    cleanup()
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
