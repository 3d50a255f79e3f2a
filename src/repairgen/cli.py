"""CLI entry point for the repair-part generator."""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml

app = typer.Typer(
    name="repairgen",
    help="Parametric repair-part generator - turns measurements and recipes into printable STL files",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_request(spec_file: Path):
    from .models import PartRequest

    if not spec_file.exists():
        typer.echo(f"Error: Specification file not found: {spec_file}", err=True)
        raise typer.Exit(1)

    with open(spec_file) as f:
        spec_data = yaml.safe_load(f) or {}

    return PartRequest.model_validate(spec_data)


def _export(name: str, part, output_dir: Path, formats: str, options) -> None:
    from .export.exporter import Exporter

    export_formats = [fmt.strip().lower() for fmt in formats.split(",") if fmt.strip()]
    exporter = Exporter(output_dir, export_formats, options)
    outputs = exporter.export(name, part)

    for filename in outputs:
        typer.echo(f"  {filename}")
    typer.echo(f"Part exported to {output_dir}")


@app.command()
def build(
    spec_file: Path = typer.Argument(..., help="Path to YAML part request"),
    output_dir: Path = typer.Option(
        Path("output"), "-o", "--output", help="Output directory for generated files"
    ),
    formats: str = typer.Option(
        "stl,step", "--formats", help="Comma-separated export formats (stl,ascii,step)"
    ),
    preview: bool = typer.Option(
        False, "--preview", help="Skip cavity and hole cuts for a fast preview"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML configuration file"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log generation steps"),
) -> None:
    """Build a part from a YAML request and export it."""
    from .config import load_config
    from .params import parameters_from_measurements
    from .parts.builder import PartBuilder
    from .validation import validate_parameters

    _configure_logging(verbose)

    try:
        request = _load_request(spec_file)
        config = load_config(config_file)
    except ValueError as e:
        typer.echo(f"Build error: {e}", err=True)
        raise typer.Exit(1)

    if request.recipe is None:
        params = dict(parameters_from_measurements(request.measurements))
        params.update(request.parameters)
        report = validate_parameters(params, config.constraints)
        if not report.valid:
            typer.echo("Invalid parameters:", err=True)
            for error in report.errors:
                typer.echo(f"  {error}", err=True)
            raise typer.Exit(1)

    options = config.generation
    if preview:
        options = options.model_copy(update={"exact_boolean": False})

    typer.echo(f"Building part: {request.name}")
    if request.measurements:
        labels = ", ".join(m.label for m in request.measurements)
        typer.echo(f"  Measurements: {labels}")

    try:
        part = PartBuilder(options).build_request(request)
        typer.echo(f"  Archetype: {part.archetype.value}")
        typer.echo(f"  Triangles: {part.mesh.triangle_count}")
        _export(request.name, part, output_dir, formats, options)
    except Exception as e:
        typer.echo(f"Build error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def recipe(
    name: str = typer.Argument(..., help="Name of an example recipe"),
    output_dir: Path = typer.Option(
        Path("output"), "-o", "--output", help="Output directory for generated files"
    ),
    formats: str = typer.Option(
        "stl,step", "--formats", help="Comma-separated export formats (stl,ascii,step)"
    ),
) -> None:
    """Build one of the bundled example recipes."""
    from .models import PartRequest
    from .parts.builder import PartBuilder
    from .recipe import EXAMPLE_RECIPES

    if name not in EXAMPLE_RECIPES:
        typer.echo(f"Error: Unknown recipe: {name}", err=True)
        typer.echo(f"Available: {', '.join(sorted(EXAMPLE_RECIPES))}", err=True)
        raise typer.Exit(1)

    request = PartRequest(name=name, recipe=EXAMPLE_RECIPES[name])
    typer.echo(f"Building recipe: {name}")

    builder = PartBuilder()
    part = builder.build_request(request)
    _export(name, part, output_dir, formats, builder.options)


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Path to YAML part request"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML configuration file"
    ),
) -> None:
    """Validate a part request without building it."""
    from .config import load_config
    from .validation import validate_parameters, validate_recipe

    typer.echo(f"Validating request from {spec_file}...")
    try:
        request = _load_request(spec_file)
    except ValueError as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)

    config = load_config(config_file)
    if request.recipe is not None:
        errors = validate_recipe(request.recipe.steps)
    else:
        errors = validate_parameters(request.parameters, config.constraints).errors

    if errors:
        for error in errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Request valid: {request.name}")


@app.command()
def inspect(
    stl_file: Path = typer.Argument(..., help="Path to a binary STL file"),
) -> None:
    """Print the triangle count and bounding box of a binary STL file."""
    from .export.stl import read_binary

    if not stl_file.exists():
        typer.echo(f"Error: STL file not found: {stl_file}", err=True)
        raise typer.Exit(1)

    try:
        facets = read_binary(stl_file.read_bytes())
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Triangles: {len(facets)}")
    if not facets:
        return

    points = [v for f in facets for v in (f.v1, f.v2, f.v3)]
    xs, ys, zs = zip(*points)
    typer.echo(f"Min: ({min(xs):.3f}, {min(ys):.3f}, {min(zs):.3f})")
    typer.echo(f"Max: ({max(xs):.3f}, {max(ys):.3f}, {max(zs):.3f})")
    typer.echo(
        f"Size: {max(xs) - min(xs):.3f} x {max(ys) - min(ys):.3f} x {max(zs) - min(zs):.3f} mm"
    )


@app.command("list-parts")
def list_parts() -> None:
    """List the catalogued part types and example recipes."""
    from .classifier import PART_TYPES
    from .recipe import EXAMPLE_RECIPES

    typer.echo("Part types:")
    for key, info in PART_TYPES.items():
        typer.echo(f"  {key}: {info['name']} - {info['description']}")
        typer.echo(f"    required: {', '.join(info['required'])}")
        if info["optional"]:
            typer.echo(f"    optional: {', '.join(info['optional'])}")

    typer.echo("Example recipes:")
    for key, example in EXAMPLE_RECIPES.items():
        typer.echo(f"  {key}: {example.description} ({len(example.steps)} steps)")


if __name__ == "__main__":
    app()
