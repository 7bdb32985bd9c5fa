"""Rich terminal rendering for the stream console."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskID, TextColumn

from progress_stream.client.display import DisplayListener, DisplayMessage, MessageType
from progress_stream.client.state import StreamStatus

MESSAGE_STYLES = {
    MessageType.INFO: "cyan",
    MessageType.DATA: "white",
    MessageType.ERROR: "bold red",
    MessageType.SUCCESS: "bold green",
}


class RichRenderer(DisplayListener):
    """Prints each message as it arrives above a live progress bar.

    Use as a context manager around the stream so the bar is started and
    stopped with it.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            TextColumn("{task.percentage:>3.0f}%"),
            console=self.console,
        )
        self._task: TaskID = self.progress.add_task("Status: Ready", total=100)

    def __enter__(self) -> "RichRenderer":
        self.progress.start()
        return self

    def __exit__(self, *exc) -> None:
        self.progress.stop()

    def message_added(self, message: DisplayMessage) -> None:
        style = MESSAGE_STYLES.get(message.type, "white")
        timestamp = message.rendered_at.strftime("%X")
        self.progress.console.print(
            f"[{style}]{escape(message.text)}[/{style}] [dim]{timestamp}[/dim]"
        )

    def progress_changed(self, progress: int) -> None:
        self.progress.update(self._task, completed=progress)

    def cleared(self) -> None:
        self.progress.reset(self._task, total=100)

    def status_changed(self, status: StreamStatus, text: str) -> None:
        self.progress.update(self._task, description=escape(text))
