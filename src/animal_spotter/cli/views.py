"""Rich renderables for CLI output."""

from datetime import datetime, timezone
from typing import List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.detail import AnimalDetail
from ..core.models import AnimalImage


def format_time_seen(time_seen: datetime) -> str:
    return time_seen.astimezone(timezone.utc).isoformat()


def names_table(names: List[str]) -> Table:
    table = Table(title="Spotted Animals", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    for index, name in enumerate(names, 1):
        table.add_row(str(index), Text(name))
    return table


def animal_panel(detail: AnimalDetail) -> Panel:
    animal = detail.animal
    body = Text()
    body.append("Time seen:   ", style="bold")
    body.append(format_time_seen(animal.time_seen) + "\n")
    body.append("Coordinates: ", style="bold")
    body.append(detail.coordinates + "\n")
    body.append("Description: ", style="bold")
    body.append(animal.description)
    return Panel(body, title=Text(animal.name, style="bold"), border_style="blue")


def image_summary(image: AnimalImage) -> str:
    return f"{image.format} image, {image.width}x{image.height} px, {len(image.data)} bytes"
