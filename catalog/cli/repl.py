"""REPL for the catalog CLI."""

import json
from dataclasses import replace

from catalog.kernel import transitions
from catalog.kernel.query import ProductQuery
from catalog.kernel.renderer import render
from catalog.kernel.types import RenderOptions, Transition


class Repl:
    """Interactive REPL: each command is one interaction on the product list."""

    def __init__(self, query: ProductQuery, options: RenderOptions | None = None):
        self.query = query
        self.options = options or RenderOptions(channel="text")
        self.running = True

    def start(self):
        """Start the REPL."""
        print("catalog > Type /help for commands.")

        while self.running:
            try:
                line = input("catalog > ")

                if not line.strip():
                    continue

                if line.lstrip().startswith("/"):
                    self._handle_command(line.lstrip())
                else:
                    # Bare text is a search
                    self._apply(transitions.set_search(line))

            except (EOFError, KeyboardInterrupt):
                print()
                break

    def _handle_command(self, line: str):
        """Handle REPL commands."""
        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()

        if cmd == "/quit":
            self.running = False
            print("Goodbye.")
        elif cmd == "/search":
            # The rest of the line, verbatim
            self._apply(transitions.set_search(arg))
        elif cmd in ("/clear", "/reset"):
            self._apply(transitions.reset_all())
        elif cmd == "/owner":
            if not arg.strip():
                print("Usage: /owner <id|all>")
            elif arg.strip().lower() == "all":
                self._apply(transitions.select_owner(None))
            else:
                user_id = self._parse_id(arg)
                if user_id is not None:
                    self._apply(transitions.select_owner(user_id))
        elif cmd == "/category":
            if not arg.strip():
                print("Usage: /category <id>")
            else:
                category_id = self._parse_id(arg)
                if category_id is not None:
                    self._apply(transitions.toggle_category(category_id))
        elif cmd == "/categories":
            self._apply(transitions.clear_categories())
        elif cmd == "/sort":
            if arg.strip():
                self._apply(transitions.cycle_sort(arg.strip().lower()))
            else:
                print("Usage: /sort <id|name|category|user>")
        elif cmd == "/view":
            self._render(replace(self.options, channel="text"))
        elif cmd == "/html":
            self._render(replace(self.options, channel="html"))
        elif cmd == "/state":
            print(json.dumps(self.query.state.to_dict(), indent=2))
        elif cmd == "/help":
            self._show_help()
        else:
            print(f"Unknown command: {cmd}")
            print("Type /help for available commands.")

    def _apply(self, transition: Transition):
        """Dispatch one transition and show the updated table."""
        result = self.query.dispatch(transition)
        if not result.applied:
            print(f"  Error: {result.error}")
            return
        self._render(self.options)

    def _render(self, options: RenderOptions):
        print(render(self.query.snapshot(), options))

    def _parse_id(self, value: str) -> int | None:
        try:
            return int(value.strip())
        except ValueError:
            print(f"  Invalid id: {value.strip()}")
            return None

    def _show_help(self):
        print("""
  /search <text>    Filter by product name (bare text works too)
  /clear            Clear the search box (resets all filters)
  /owner <id|all>   Show one owner's products
  /category <id>    Toggle a category
  /categories       Show all categories
  /sort <column>    Cycle sort: id, name, category, user
  /reset            Reset all filters
  /view             Render as text
  /html             Render as HTML
  /state            Show the current filter state
  /quit             Exit
""")
