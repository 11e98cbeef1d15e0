"""
Example: cube projection usage.

Demonstrates how to use cubeproj for:
- Rendering a posed cube through a posed camera
- Loading poses from presets and JSON
- Comparing the compatible and exact camera inverses
- Handling degenerate camera placements
"""

import logging
import tempfile
from pathlib import Path

from cubeproj import (
    BoxPose,
    CameraPose,
    DegenerateProjectionError,
    RenderConfig,
    Scene,
    get_box_preset,
    get_camera_preset,
    render_scene,
)
from cubeproj.config import load_box_json, save_box_json

# Configure logging to see per-render details
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def print_points(points) -> None:
    for p in points:
        print(f"  {p.label:<20s} x={p.x:9.3f}  y={p.y:9.3f}")


def example_1_basic_render():
    """Example 1: Render with explicit poses."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Basic Render")
    print("=" * 70)

    points = render_scene(BoxPose(rx=20, ry=30), CameraPose(zoom=1.5))
    print_points(points)


def example_2_presets_and_json():
    """Example 2: Presets and JSON round trip."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Presets and JSON")
    print("=" * 70)

    box = get_box_preset("isometric")
    camera = get_camera_preset("telephoto")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "box.json"
        save_box_json(box, path)
        print(f"Saved box pose to {path.name}: {path.read_text()}")
        box = load_box_json(path)

    print_points(render_scene(box, camera))


def example_3_camera_inverse_modes():
    """Example 3: Compatible vs exact camera inverse."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Camera Inverse Modes")
    print("=" * 70)

    box = BoxPose()
    camera = CameraPose(ry=10, tx=1.0)

    print("Compatible (default):")
    print_points(render_scene(box, camera))
    print("Exact rigid inverse:")
    print_points(render_scene(box, camera, RenderConfig(exact_camera_inverse=True)))


def example_4_fluent_scene():
    """Example 4: Fluent Scene builder."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Scene Builder")
    print("=" * 70)

    points = Scene().rotate(15, 40, 0).scale(1.0, 0.5, 1.0).camera(ty=0.5).zoom(2.0).render()
    print_points(points)


def example_5_degenerate_camera():
    """Example 5: Camera placed in the front face plane."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: Degenerate Camera")
    print("=" * 70)

    try:
        render_scene(BoxPose(), CameraPose(tz=-4.0))
    except DegenerateProjectionError as e:
        print(f"Render failed: {e}")


if __name__ == "__main__":
    example_1_basic_render()
    example_2_presets_and_json()
    example_3_camera_inverse_modes()
    example_4_fluent_scene()
    example_5_degenerate_camera()
