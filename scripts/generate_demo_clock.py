"""Generate demo SVG frames of a minute change, from 11:29 to 11:30."""

from datetime import datetime
from pathlib import Path

from clockwall.app import ClockwallApp
from clockwall.render import SvgSurface

output_dir = Path("/tmp/clockwall_demo")
output_dir.mkdir(parents=True, exist_ok=True)

clock_app = ClockwallApp(width=1920, height=1080)
clock_app.update(0, datetime(2024, 1, 1, 11, 29, 59))
clock_app.update(0, datetime(2024, 1, 1, 11, 30, 0))

# Five snapshots across the 2.5 s transition
for i in range(5):
    now = datetime(2024, 1, 1, 11, 30, i)
    surface = SvgSurface(clock_app.width, clock_app.height)
    clock_app.draw(surface, now)

    frame_path = output_dir / f"frame_{i}.svg"
    frame_path.write_text(surface.to_svg())
    print(f"Generated {frame_path} ({clock_app.grid.clock_at(4, 0).progress:.0%} through the animation)")

    clock_app.grid.advance(625)
