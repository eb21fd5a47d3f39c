"""
Example usage of the snakegeom module.
This demonstrates a snake path made of lines and arcs checked for self-collision.
"""

import math

from snakegeom import Arc, Line, Vec, find_intersections, first_intersection, polyline_to_lines

# Body of the snake: a straight run, a U-turn arc, and a run back
body = polyline_to_lines([Vec(0.0, 0.0), Vec(4.0, 0.0)])
body.append(Arc(Vec(4.0, 1.0), 1.0, -math.pi / 2, math.pi))
body.append(Line(Vec(4.0, 2.0), Vec(1.0, 2.0)))

print(f"✓ Body has {len(body)} segments")

# Consecutive segments always touch, so skip them
hits = find_intersections(body, skip_adjacent=True)
print(f"✓ {len(hits)} self-intersections in the body")

# The head turns down and cuts across the first run
head = Line(Vec(1.0, 2.0), Vec(1.0, -1.0))
hit = first_intersection(head, body[:-1])
if hit is not None:
    index, point = hit
    print(f"✓ Head hits segment {index} at ({point.x:.3f}, {point.y:.3f})")
else:
    print("✓ Head is clear")
