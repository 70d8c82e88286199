import typer
from pcut import acquire, aggregate, config, derive, pixels, quantize
from pathlib import Path
from typing import List, Optional

import rich.traceback

from pcut.errors import AcquisitionError, PaletteCutError


def format_colors(colors: List[pixels.ColorRecord]) -> str:
    return " ".join(color.to_css() for color in colors)


def palettecut_cli(
    input_path: Path = typer.Argument(
        ...,
        help="Input image file (e.g., image.jpg).",
        metavar="INPUT_FILE",
        exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
    ),
    preset: Optional[str] = typer.Option(
        None, help="Preset detail level: coarse, standard, fine."
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=1,
        help="Median-cut split depth; the palette holds 2^depth colors. Default: 2."
    ),
    shrink_factor: Optional[int] = typer.Option(
        None, "--shrink-factor", min=1,
        help=f"Divide image width and height by this before analysis. Default: {config.DEFAULT_SHRINK_FACTOR} (or ${config.SHRINK_FACTOR_ENV})."
    ),
    percent: Optional[float] = typer.Option(
        None, "--percent", min=0.0,
        help=f"Lightness step for monochromatic shades, in percent of the current lightness. Default: {config.DEFAULT_PERCENT}."
    ),
    shades: Optional[int] = typer.Option(
        None, "--shades", min=0,
        help=f"Number of lighter and darker shades to derive. Default: {config.DEFAULT_SHADES}."
    ),
    derive_colors: bool = typer.Option(
        True, "--derive/--no-derive",
        help="Derive complementary and monochromatic colors from the dominant color. Default: True."
    ),
):
    """
    Prints the representative colors of an image.
    """
    try:
        settings = config.resolve_settings(
            preset=preset, max_depth=max_depth, shrink_factor=shrink_factor,
            percent=percent, shades=shades,
        )
    except PaletteCutError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED); raise typer.Exit(code=1)

    if preset:
        typer.echo(f"Applying preset: '{preset}'")
    typer.echo(f"Palette will hold {2 ** settings.max_depth} colors (depth {settings.max_depth}).")

    try:
        buffer = acquire.acquire(input_path, settings.shrink_factor)
    except AcquisitionError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED); raise typer.Exit(code=1)

    image_pixels = pixels.decode(buffer)
    typer.echo(f"Analyzing {len(image_pixels)} pixels (shrink factor {settings.shrink_factor}).")

    try:
        blend = aggregate.median_blend(image_pixels)
        dominant = aggregate.dominant_by_frequency(image_pixels)
        palette = quantize.quantize(image_pixels, settings.max_depth)
    except PaletteCutError as e:
        typer.secho(f"Error analyzing {input_path.name}: {e}", fg=typer.colors.RED)
        if len(image_pixels) < 2 ** settings.max_depth:
            typer.secho("Try a smaller --shrink-factor or --max-depth.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    typer.echo(f"Median blend: {blend.to_css()}")
    typer.echo(f"Dominant:     {dominant.to_css()}")
    typer.echo(f"Palette:      {format_colors(palette)}")

    if derive_colors:
        try:
            mono = derive.monochromatic(dominant, settings.percent, settings.shades)
            complement = derive.complementary(dominant)
        except PaletteCutError as e:
            typer.secho(f"Error deriving colors: {e}", fg=typer.colors.RED); raise typer.Exit(code=1)
        typer.echo(f"Complementary: {complement.to_css()}")
        typer.echo(f"Lighter:       {format_colors(list(mono.light))}")
        typer.echo(f"Darker:        {format_colors(list(mono.dark))}")

    typer.secho("\nAnalysis complete!", fg=typer.colors.GREEN)


if __name__ == "__main__":
    rich.traceback.install(show_locals=False, suppress=[typer])
    typer.run(palettecut_cli)
