#!/usr/bin/env python3
"""Discover Hue bridges on the local network and optionally register on one.

Usage:
    python examples/discover.py               # list bridges
    python examples/discover.py --register    # press the link button first
"""

import argparse
import asyncio
import logging
import sys

from huelib import BridgeError, HueError, discover_nupnp, get_description, register_user


async def run(register: bool) -> bool:
    bridges = await discover_nupnp()
    if not bridges:
        print("No Hue bridges found on the network.")
        return False

    for bridge in bridges:
        description = await get_description(bridge.internalipaddress)
        print(
            f"{bridge.internalipaddress}  {description.device.friendly_name}  "
            f"(ID: {bridge.id}, model {description.device.model_number})"
        )

    if register:
        bridge_ip = bridges[0].internalipaddress
        input(f"Press the LINK BUTTON on {bridge_ip}, then ENTER: ")
        try:
            registration = await register_user(bridge_ip, "huelib#discover")
        except BridgeError as e:
            print(f"Registration failed: {e.description}")
            return False
        print(f"HUE_BRIDGE_IP={bridge_ip}")
        print(f"HUE_USERNAME={registration.username}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Discover Philips Hue bridges")
    parser.add_argument(
        "--register",
        action="store_true",
        help="Register an application key on the first bridge found",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        success = asyncio.run(run(args.register))
    except HueError as e:
        print(f"Discovery failed: {e}")
        success = False
    except KeyboardInterrupt:
        print("\nCancelled.")
        success = False
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
