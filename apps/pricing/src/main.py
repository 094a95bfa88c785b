"""Pricing CLI 入口

遵循 P&A 架構：CLI / HTTP → Driving Adapter → Application Service
"""

import sys

import fire

from apps.pricing.src.lifespan import startup, shutdown, get_injector
from apps.pricing.src.adapters.driving.cli.pricing_controller import (
    PricingController,
)
from libs.shared.src.errors.domain_error import DomainError


def main() -> None:
    startup()
    controller = PricingController(get_injector())
    try:
        fire.Fire(controller)
    except DomainError as e:
        print(f"❌ {e.code}: {e.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        shutdown()


if __name__ == "__main__":
    main()
