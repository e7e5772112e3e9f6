# main.py
import json
import sys

from rectpath.app.build import build


def run(path: str) -> int:
    with open(path) as f:
        cfg = json.load(f)

    app = build(cfg)

    # Scripted clicks are already queued by build(); each MoveStep schedules the next tick.
    processed = app.run()

    for oid, obj in app.world.objects.items():
        print(f"{oid}: {obj.kind.value} at {obj.position.get()}")
    return processed


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python main.py <scenario.json>")
    run(sys.argv[1])
