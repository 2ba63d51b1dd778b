"""QueryRepl — interactive shell for trying out parameter styles.

Also provides the ``querystyle-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import json
import sys
from typing import IO

from .errors import QueryStyleError
from .model import ParameterSpec, Style, join_pairs
from .query import QueryBuilder, encode_parameter


# ---------------------------------------------------------------------------
# QueryRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class QueryRepl:
    """Stateful shell that accumulates encoded parameters across calls.

    Each input line is ``<name> <style>[*] <json>``; a trailing ``*`` on the
    style turns explode on. Usage::

        repl = QueryRepl()
        repl.eval('color form* ["blue", "black"]')   # → "color=blue&color=black"
        repl.eval('filter deepObject* {"status": "open"}')
        repl.builder.to_string()
        # → "color=blue&color=black&filter[status]=open"
        repl.reset()

    ``simple`` lines are encoded and returned but not accumulated, since a
    simple value has no key.
    """

    def __init__(self) -> None:
        self.builder = QueryBuilder()

    def eval(self, text: str) -> str:
        """Encode one parameter line and return its wire text."""
        spec, value = parse_line(text)
        if spec.style is Style.SIMPLE:
            return encode_parameter(spec, value)
        return join_pairs(self.builder.add(spec, value))

    def reset(self) -> None:
        """Forget all accumulated parameters."""
        self.builder = QueryBuilder()


def parse_line(text: str) -> tuple[ParameterSpec, object]:
    """Split ``<name> <style>[*] <json>`` into a spec and a decoded value."""
    parts = text.strip().split(None, 2)
    if len(parts) != 3:
        raise ValueError(f"expected '<name> <style>[*] <json>', got {text!r}")
    name, style_text, raw = parts
    explode = style_text.endswith("*")
    style = Style.parse(style_text.rstrip("*"))
    return ParameterSpec(name, style, explode), json.loads(raw)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _show_params(repl: QueryRepl, dest: IO[str]) -> None:
    """Print every accumulated parameter with its pairs."""
    if not repl.builder.params:
        print("  (no parameters defined)", file=dest)
        return
    width = max(len(p.spec.name) for p in repl.builder.params)
    for param in repl.builder.params:
        flag = "*" if param.spec.explode else ""
        if param.field_explode:
            overrides = ", ".join(
                f"{name}{'*' if on else ''}" for name, on in param.field_explode.items()
            )
            flag += f" ({overrides})"
        print(
            f"  {param.spec.name:<{width}} {param.spec.style.value}{flag} : "
            f"{join_pairs(param.pairs)}",
            file=dest,
        )


def _process_line(repl: QueryRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":params":
        _show_params(repl, dest)
        return True

    if line == ":query":
        print(repl.builder.to_string(), file=dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── Parameter line ────────────────────────────────────────────────────
    try:
        print(repl.eval(line), file=dest)
    except (QueryStyleError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive shell (``querystyle-repl`` / ``python -m querystyle.repl``)."""
    repl = QueryRepl()
    dest: IO[str] = sys.stdout

    print("querystyle  (:q to quit  |  :params  :query  :reset  |  <name> <style>[*] <json>)")

    while True:
        try:
            line = input("QS> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        # ── Batch execute: ?<< filepath ───────────────────────────────────
        if line.startswith("?<< "):
            filepath = line[4:].strip()
            try:
                with open(filepath, encoding="utf-8") as fh:
                    for file_line in fh:
                        _process_line(repl, file_line.rstrip("\n"), dest)
            except OSError as exc:
                print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
            continue

        if not _process_line(repl, line, dest):
            break


if __name__ == "__main__":
    main()
