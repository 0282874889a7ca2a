#!filepath: nglog/cli.py
from pathlib import Path

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from nglog import __version__
from nglog.config import AppConfig
from nglog.errors import NgLogError
from nglog.export import write_parquet
from nglog.model import NgLog
from nglog.utils.logger import logs

app = typer.Typer(help="ngLog decode / inspect / export CLI")


def _load(path: Path, world: bool) -> NgLog:
    """
    文件 I/O 只在 CLI 层；库本身只接收字节
    """
    if not path.exists():
        print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(code=2)

    with open(path, "rb") as f:
        try:
            return NgLog.world_from_reader(f) if world else NgLog.local_from_reader(f)
        except NgLogError as e:
            print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)


@app.callback()
def main(
        ctx: typer.Context,
        config: Path = typer.Option(None, "--config", "-c", help="YAML config path"),
):
    cfg = AppConfig.load(path=str(config) if config else None)
    ctx.obj = cfg

    logs.setup_stderr()
    if cfg.log.to_file:
        logs.configure_file(cfg.log)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
@logs.catch()
def decode(
        path: Path,
        world: bool = typer.Option(False, "--world", "-w", help="输入为 world 版（XOR 混淆）"),
        out: Path = typer.Option(None, "--out", "-o", help="输出文件，默认 stdout"),
):
    """
    读取 local / world ngLog，输出规范 local 文本
    """
    log = _load(path, world)
    text = log.to_text()

    if out is None:
        typer.echo(text, nl=False)
        return

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8", newline="")
    print(f"[green]{len(log)} events -> {escape(str(out))}[/green]")


@app.command()
@logs.catch()
def show(
        path: Path,
        world: bool = typer.Option(False, "--world", "-w"),
        limit: int = typer.Option(50, "--limit", "-n", min=0, help="最多显示的事件数（0 = 全部）"),
):
    """
    以表格形式打印事件
    """
    log = _load(path, world)
    events = log.events if limit == 0 else log.events[:limit]

    table = Table(title=escape(f"{path.name} ({len(log)} events)"))
    table.add_column("#", justify="right")
    table.add_column("timestamp")
    table.add_column("class")
    table.add_column("id")
    table.add_column("params")

    # 字段原样显示，不按 rich markup 解释
    for i, ev in enumerate(events, start=1):
        table.add_row(
            str(i),
            Text(ev.timestamp),
            Text(ev.event_class) if ev.event_class is not None else Text("-", style="dim"),
            Text(ev.event_id),
            Text(" | ".join(ev.event_params)),
        )

    Console().print(table)


@app.command()
@logs.catch()
def export(
        ctx: typer.Context,
        path: Path,
        out: Path,
        world: bool = typer.Option(False, "--world", "-w"),
        compression: str = typer.Option(None, "--compression", help="默认读取配置 export.compression"),
):
    """
    导出为 Parquet（不做任何统计聚合）
    """
    log = _load(path, world)
    if compression is None:
        compression = ctx.obj.export.compression

    write_parquet(log, out, compression=compression)
    print(f"[green]{len(log)} events -> {escape(str(out))} ({compression})[/green]")


if __name__ == "__main__":
    app()

# python -m nglog.cli decode tests/data/ngLog_Example_Log_File.log.txt
