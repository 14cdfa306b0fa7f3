#!/usr/bin/env python3
"""
SkyTint Command Line Interface

Main CLI entry point for SkyTint. Recolors the sky of still frames by time
of day, optionally tints them and injects noise.
"""

import sys
import time
import click
import logging
from pathlib import Path
from typing import Optional, List

import numpy as np

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from skytint.config import load_config, get_config_value
from skytint.exceptions import SkyTintError
from skytint.io import load_image, save_image, is_image_file
from skytint.processing import SkyTintPipeline, ProcessingRecipe
from skytint.processing.color import sky_color_for_time, sky_color_for_datetime
from skytint.processing.noise import NoiseSpec
from skytint.processing.sky import SegmentationConfig, SegmentationStrategy, CompositingConfig
from skytint.utils import ProcessingStats, setup_console_logging

logger = logging.getLogger(__name__)

NOISE_CHOICES = ['gaussian', 'salt-pepper', 'poisson']


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, config: Optional[str] = None, verbose: bool = False, quiet: bool = False):
    """
    SkyTint - time-of-day sky recoloring for still frames

    Segments the sky of each frame, blends in a hue matching the hour of the
    day, and can add a tint and Gaussian, salt-and-pepper or Poisson noise.
    """

    # Ensure context object exists
    if ctx.obj is None:
        ctx.obj = {}

    ctx.obj['config'] = load_config(config)

    # Configure logging level
    if verbose:
        level = 'DEBUG'
    elif quiet:
        level = 'ERROR'
    else:
        level = get_config_value(ctx.obj['config'], 'logging.level', 'INFO')
    setup_console_logging(level, fmt=get_config_value(
        ctx.obj['config'], 'logging.format',
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    # Store CLI options in context
    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet


def _collect_inputs(inputs: List[Path]) -> List[Path]:
    """Expand directories into the image files they contain."""
    files = []
    for path in inputs:
        if path.is_dir():
            files.extend(sorted(p for p in path.iterdir() if p.is_file() and is_image_file(p)))
        else:
            files.append(path)
    return files


def _output_path(source: Path, output: Path, single: bool, suffix: str) -> Path:
    """Resolve where the processed version of a source file goes."""
    if single and is_image_file(output):
        return output
    return output / f"{source.stem}{suffix}{source.suffix}"


@main.command()
@click.argument('inputs', nargs=-1, required=True,
                type=click.Path(exists=True, path_type=Path))
@click.option('--output', '-o', required=True, type=click.Path(path_type=Path),
              help='Output file (single input) or directory')
@click.option('--grayscale', '-g', is_flag=True, help='Convert frames to grayscale')
@click.option('--color-sky', '-s', is_flag=True, help='Recolor the sky by time of day')
@click.option('--hour', type=click.IntRange(0, 23),
              help='Hour of day for the sky color (defaults to now)')
@click.option('--strategy', type=click.Choice(['region_growing', 'probabilistic']),
              help='Sky segmentation strategy')
@click.option('--noise', '-n', type=click.Choice(NOISE_CHOICES), help='Noise model to apply')
@click.option('--noise-intensity', '-i', type=float,
              help='Noise intensity (stddev for Gaussian, 0-255 for salt-and-pepper)')
@click.option('--tint-color', '-t', help='Tint color as hex, e.g. "#ff8800"')
@click.option('--tint-intensity', type=click.FloatRange(0.0, 1.0), help='Tint intensity (0.0-1.0)')
@click.option('--seed', type=int, help='Seed for reproducible noise')
@click.option('--save-recipe', is_flag=True, help='Write the recipe as JSON next to each output')
@click.pass_context
def process(ctx, inputs, output: Path, grayscale: bool, color_sky: bool,
            hour: Optional[int], strategy: Optional[str], noise: Optional[str],
            noise_intensity: Optional[float], tint_color: Optional[str],
            tint_intensity: Optional[float], seed: Optional[int], save_recipe: bool):
    """
    Process image files.

    INPUTS: Image files or directories of images
    """
    config = ctx.obj.get('config', {})
    quiet = ctx.obj.get('quiet', False)

    try:
        segmentation = SegmentationConfig.from_config(config)
        if strategy:
            segmentation.strategy = SegmentationStrategy(strategy)
        compositing = CompositingConfig.from_config(config)

        noise_spec = None
        if noise:
            if noise_intensity is None:
                noise_intensity = get_config_value(config, 'noise.default_intensity', 25.0)
            noise_spec = NoiseSpec.from_intensity(noise, noise_intensity)

        if tint_intensity is None:
            tint_intensity = get_config_value(config, 'tint.intensity', 0.5)

        recipe = ProcessingRecipe(
            grayscale=grayscale,
            color_sky=color_sky,
            hour=hour,
            segmentation=segmentation,
            tint_color=tint_color,
            tint_intensity=tint_intensity,
            noise=noise_spec,
        )
    except (SkyTintError, ValueError) as e:
        # Invalid options and invalid config values both end up here
        raise click.BadParameter(str(e))

    files = _collect_inputs(list(inputs))
    if not files:
        click.echo("❌ No images found", err=True)
        ctx.exit(1)

    single = len(files) == 1
    suffix = get_config_value(config, 'output.suffix', '_skytint')
    quality = get_config_value(config, 'output.jpeg_quality', 95)

    pipeline = SkyTintPipeline(compositing)
    rng = np.random.default_rng(seed) if seed is not None else None

    stats = ProcessingStats()
    stats.set_total(len(files))

    for source in files:
        start_time = time.time()
        try:
            image = load_image(source)
            result = pipeline.process(image, recipe, rng=rng)
            target = save_image(result, _output_path(source, output, single, suffix), quality)
            if save_recipe:
                target.with_suffix('.json').write_text(recipe.to_json())
        except (SkyTintError, OSError) as e:
            logger.error(f"Failed to process {source}: {e}")
            stats.add_error(str(source), str(e))
            stats.add_result(False)
            continue

        stats.add_result(True, time.time() - start_time)
        if not quiet:
            click.echo(f"✓ {source.name} -> {target}")

    if not quiet and not single:
        stats.print_summary()

    if stats.failed_files:
        ctx.exit(1)


@main.command('sky-color')
@click.option('--hour', type=click.IntRange(0, 23), help='Hour of day (defaults to now)')
def sky_color(hour: Optional[int]):
    """Show the sky color for an hour of the day."""
    if hour is None:
        color = sky_color_for_datetime()
    else:
        color = sky_color_for_time(hour)

    r, g, b = color
    label = f"Hour {hour}" if hour is not None else "Now"
    click.echo(f"{label}: rgb({r}, {g}, {b}) #{r:02x}{g:02x}{b:02x}")


if __name__ == '__main__':
    main()
