"""CLI entry point for objx.

Usage:
    objx run                          # Run full pipeline
    objx run-step s01_obj_export -i '{"scene_path": "scene.json"}'
    objx info                         # Show pipeline info
    objx inspect scene.json           # Per-mesh table
    objx export scene.json out.obj    # Direct scene -> OBJ
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from objx.core.logging import setup_logging

app = typer.Typer(name="objx", help="Indexed-mesh scene to OBJ exporter")
console = Console()

DEFAULT_CONFIG = Path("configs/pipeline.yaml")


def _init_logging(log_level: Optional[str], log_file: Optional[Path] = None) -> None:
    try:
        setup_logging(log_level, log_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


@app.command()
def run(
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
    scene: Path = typer.Option(None, "--scene", "-s", help="Scene document for the first step"),
    log_level: Optional[str] = typer.Option(None, help="Log level (default: $OBJX_LOG_LEVEL or INFO)"),
    log_file: Optional[Path] = typer.Option(None, help="Also write logs to this file"),
) -> None:
    """Run the full pipeline."""
    _init_logging(log_level, log_file)
    from objx.core.pipeline_runner import run_pipeline

    initial_input = {"scene_path": str(scene)} if scene else None
    results = run_pipeline(config, initial_input=initial_input)
    for step_name, output in results.items():
        console.print(f"[green]{step_name}:[/green] {output.model_dump_json()}")


@app.command()
def run_step(
    step_name: str = typer.Argument(..., help="Step name (e.g. s01_obj_export)"),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
    input_json: str = typer.Option(None, "--input", "-i", help="Input as JSON string"),
    log_level: Optional[str] = typer.Option(None, help="Log level (default: $OBJX_LOG_LEVEL or INFO)"),
) -> None:
    """Run a single pipeline step."""
    import json

    _init_logging(log_level)
    from objx.core.pipeline_runner import load_pipeline_config, import_step_class, load_step_config

    pipeline_cfg = load_pipeline_config(config)
    entry = next((s for s in pipeline_cfg.steps if s.name == step_name), None)
    if entry is None:
        console.print(f"[red]Step '{step_name}' not found in pipeline config[/red]")
        raise typer.Exit(1)

    step_cls = import_step_class(entry.module)
    step_config = load_step_config(Path(entry.config_file), step_cls.config_type)
    step_instance = step_cls(config=step_config, data_root=pipeline_cfg.data_root)

    input_data = dict(entry.inputs)
    if input_json:
        input_data.update(json.loads(input_json))
    else:
        schema = step_cls.input_type.model_json_schema()
        missing = [f for f in schema.get("required", []) if f not in input_data]
        if missing:
            console.print(f"[yellow]Step '{step_name}' requires input fields: {missing}[/yellow]")
            console.print("[yellow]Use --input/-i with JSON string, e.g.:[/yellow]")
            console.print(f'  objx run-step {step_name} -i \'{{"scene_path": "scene.json"}}\'')
            raise typer.Exit(1)

    console.print(f"[green]Running step: {step_name}[/green]")
    step_input = step_cls.input_type(**input_data)
    output = step_instance.execute(step_input)
    console.print(f"[green]Done. Output:[/green] {output.model_dump_json(indent=2)}")


@app.command()
def info(config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path")) -> None:
    """Show pipeline steps and their status."""
    from objx.core.pipeline_runner import load_pipeline_config

    pipeline_cfg = load_pipeline_config(config)
    table = Table(title=f"Pipeline: {pipeline_cfg.project_name}")
    table.add_column("#", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Module", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("Depends On", style="dim")

    for i, step in enumerate(pipeline_cfg.steps, 1):
        table.add_row(
            str(i),
            step.name,
            step.module,
            "Y" if step.enabled else "N",
            ", ".join(step.depends_on) if step.depends_on else "-",
        )
    console.print(table)


@app.command()
def inspect(scene_path: Path = typer.Argument(..., help="JSON scene document")) -> None:
    """Show the meshes of a scene document."""
    from objx.utils.io import load_scene, scene_summary

    try:
        scene = load_scene(scene_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Scene: {scene_path.name}")
    table.add_column("#", style="dim")
    table.add_column("Mesh", style="cyan")
    table.add_column("Vertices", justify="right")
    table.add_column("Corners", justify="right")
    table.add_column("Polygons", justify="right")
    table.add_column("Normals", style="yellow")
    table.add_column("UVs", style="yellow")

    for row in scene_summary(scene):
        table.add_row(
            str(row["index"]),
            row["name"],
            str(row["num_vertices"]),
            str(row["num_corners"]),
            str(row["num_polygons"]),
            "Y" if row["has_normals"] else "N",
            "Y" if row["has_uvs"] else "N",
        )
    console.print(table)


@app.command()
def export(
    scene_path: Path = typer.Argument(..., help="JSON scene document"),
    output_path: Path = typer.Argument(..., help="Destination .obj file"),
    precision: int = typer.Option(6, min=0, max=17, help="Decimals written for every float field"),
    log_level: Optional[str] = typer.Option(None, help="Log level (default: $OBJX_LOG_LEVEL or INFO)"),
) -> None:
    """Export a scene document straight to OBJ."""
    _init_logging(log_level)
    from objx.steps.s01_obj_export._obj_writer import export_obj
    from objx.utils.io import load_scene

    try:
        scene = load_scene(scene_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not export_obj(scene, output_path, precision=precision):
        console.print(f"[red]Could not write {output_path}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Wrote {scene.mesh_count} meshes to {output_path}[/green]")


if __name__ == "__main__":
    app()
