# floorboard_solver/__main__.py
# Package entrypoint so you can run:
#   python -m floorboard_solver --help
# and it will delegate to the project JSON runner.
#
# Examples:
#   python -m floorboard_solver --project room.json --mode optimize --seed 7
#   python -m floorboard_solver --example --mode batch --batch 5000 --out out/

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
