#!/usr/bin/env python3
"""List the lights of the bridge configured in the environment (or .env).

Usage:
    python examples/lights.py                 # list lights
    python examples/lights.py 3 on            # switch light 3 on
"""

import asyncio
import logging
import sys

from huelib import Bridge, HueConfig, HueError
from huelib.resources import LightStateModifier


async def run(argv) -> int:
    config = HueConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    async with Bridge(config) as bridge:
        if len(argv) == 2:
            light_id, action = argv
            result = await bridge.set_light_state(
                light_id, LightStateModifier(on=action == "on")
            )
            for error in result.errors:
                print(f"error {error.type} at {error.address}: {error.description}")
            return 0 if result.ok else 1

        for light in sorted(await bridge.get_all_lights(), key=lambda light: int(light.id)):
            state = "on" if light.state.on else "off"
            print(f"{light.id:>3}  {light.name:<30} {state:<4} reachable={light.state.reachable}")
    return 0


def main():
    try:
        sys.exit(asyncio.run(run(sys.argv[1:])))
    except HueError as e:
        print(f"Bridge error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
