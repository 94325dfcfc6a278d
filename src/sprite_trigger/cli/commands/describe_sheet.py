import typer

from sprite_trigger.demo.scene import (CHARACTER_LAYOUT, CHARACTER_SHEET,
                                       DEMO_ANIMATIONS)


def describe_sheet_command() -> None:
    """Print the demo sheet's grid and each animation's frame rectangles."""

    layout = CHARACTER_LAYOUT
    width, height = layout.extent
    typer.echo(f"sheet: {CHARACTER_SHEET}")
    typer.echo(
        f"grid: {layout.columns}x{layout.rows} cells of "
        f"{layout.cell_width}x{layout.cell_height}px "
        f"({layout.frame_count} frames, {width}x{height}px)"
    )
    typer.echo(f"offset: x={layout.offset_x} y={layout.offset_y}")
    for spec in DEMO_ANIMATIONS:
        typer.echo(
            f"{spec.tag}: frames {spec.first_index}..={spec.last_index} "
            f"at {spec.fps} fps"
        )
        for index in range(spec.first_index, spec.last_index + 1):
            x, y, w, h = layout.rect_for(index)
            typer.echo(f"  {index:>3}: x={x} y={y} w={w} h={h}")
