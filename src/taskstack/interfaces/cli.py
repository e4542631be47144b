"""Interactive menu for the task registry."""

from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

from ..exceptions import NoHistoryError, TaskRegistryError
from ..history.actions import AppliedAction
from ..registry import TaskRegistry
from ..config import config


console = Console()

MENU = [
    ("1", "Add Task"),
    ("2", "Remove Task"),
    ("3", "Search Task"),
    ("4", "Undo"),
    ("5", "Redo"),
    ("6", "Exit"),
]


class TaskCLI:
    """
    Menu-driven interface over a TaskRegistry.

    Each round shows the current tasks and the menu, reads one choice
    plus its fields, calls the registry and prints the outcome. Registry
    errors are shown as messages and the loop continues.
    """

    def __init__(
        self,
        registry: Optional[TaskRegistry] = None,
        session: Optional[PromptSession] = None,
        out: Optional[Console] = None,
    ):
        self.registry = registry if registry is not None else TaskRegistry()
        self.console = out or console

        if session is None:
            history_path = config.paths.prompt_history
            if history_path:
                history_path.parent.mkdir(parents=True, exist_ok=True)
                history = FileHistory(str(history_path))
            else:
                history = InMemoryHistory()
            session = PromptSession(history=history)
        self.session = session

    def run(self) -> int:
        """
        Main menu loop.

        Returns:
            Process exit code
        """
        while True:
            self._show_tasks()
            self._show_menu()

            try:
                choice = self.session.prompt("Enter your choice: ").strip()
                should_exit = self._handle_choice(choice)
            except KeyboardInterrupt:
                self.console.print("\n[yellow]Interrupted. Choose 6 to exit.[/yellow]")
                continue
            except EOFError:
                should_exit = True

            if should_exit:
                break

        self.console.print("[green]Exiting the program.[/green]")
        return 0

    def _handle_choice(self, choice: str) -> bool:
        """
        Dispatch a menu choice.

        Returns:
            True if should exit, False otherwise
        """
        choice = choice.lower()

        if choice in ["6", "exit", "quit", "q"]:
            return True

        try:
            if choice == "1":
                self._add_task()
            elif choice == "2":
                self._remove_task()
            elif choice == "3":
                self._search_task()
            elif choice == "4":
                self._undo()
            elif choice == "5":
                self._redo()
            else:
                self.console.print("[red]Invalid choice. Please try again.[/red]")
        except NoHistoryError as e:
            self.console.print(f"[yellow]{e}[/yellow]")
        except TaskRegistryError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")

        return False

    def _ask(self, message: str) -> str:
        return self.session.prompt(message).strip()

    # ==================== Display ====================

    def _show_tasks(self):
        """Display current tasks in insertion order."""
        tasks = self.registry.list_tasks()

        if not tasks:
            self.console.print("\n[dim]No tasks. Choose 1 to add one.[/dim]")
            return

        table = Table(title="Current Tasks", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Name", style="cyan")
        table.add_column("Description")

        for number, task in enumerate(tasks, start=1):
            table.add_row(str(number), escape(task.name), escape(task.description))

        self.console.print()
        self.console.print(table)

    def _show_menu(self):
        lines = "\n".join(f"{key}. {label}" for key, label in MENU)
        self.console.print(Panel(lines, title="Menu", border_style="cyan", expand=False))

    # ==================== Actions ====================

    def _add_task(self):
        name = self._ask("Enter task name: ")
        if not name:
            self.console.print("[red]Task name must not be empty.[/red]")
            return
        description = self._ask("Enter task description: ")

        self.registry.add_task(name, description)
        self.console.print("[green]Task added successfully.[/green]")

    def _remove_task(self):
        name = self._ask("Enter task name to remove: ")
        if not name:
            self.console.print("[red]Task name must not be empty.[/red]")
            return

        self.registry.remove_task(name)
        self.console.print("[green]Task removed successfully.[/green]")

    def _search_task(self):
        name = self._ask("Enter task name to search: ")

        task = self.registry.search_task(name) if name else None
        if task:
            self.console.print(f"[green]Found Task:[/green] {escape(task.display())}")
        else:
            self.console.print("[red]Task not found.[/red]")

    def _undo(self):
        applied = self.registry.undo()
        self._report(applied)

    def _redo(self):
        applied = self.registry.redo()
        self._report(applied)

    def _report(self, applied: AppliedAction):
        prefix = applied.direction.capitalize()
        if applied.added:
            verb = "added back" if applied.direction == "undo" else "added"
        else:
            verb = "removed"
        self.console.print(
            f"[green]{prefix}: Task {verb} successfully.[/green] [dim]({escape(applied.task.name)})[/dim]"
        )
