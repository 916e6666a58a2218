#!/usr/bin/env python3
"""
Interactive local quote harness (no HTTP).

Usage:
  python3 scripts/quote_local.py

Drives the same QuoteWizard the API uses, with the real analysis timers
running on the local event loop. Progress is kept in SESSION_STORAGE_PATH,
so quitting and restarting resumes the quote.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.quote_wizard import QuoteWizard  # noqa: E402
from app.application.utils.state_codec import partial_from_dict, quote_state_to_dict  # noqa: E402
from app.domain.entities.services import PPFFilmType, ServiceType, label_for  # noqa: E402
from app.domain.entities.wizard_step import WizardStep  # noqa: E402
from app.wiring.dependencies import close_quote_wizard, get_quote_wizard  # noqa: E402


HELP = """Commands:
  next | back              move through the wizard
  toggle <service>         select/deselect a service (ppf, tint, ceramic, ...)
  set <json>               merge top-level keys, e.g. set {"vehicle": {"year": "2024", "make": "Kia", "model": "EV9"}}
  film <clear|stealth|fashion>
  promo <code> | unpromo <code>
  jump <service>           add a service and go to its first step
  zone <name>              claim the free PPF zone offer
  pick <index>             accept an upsell offer
  state                    print the stored quote
  submit | reset | quit"""


def _print_view(wizard: QuoteWizard) -> None:
    snap = wizard.snapshot()
    print("-" * 60)
    print(f"step {snap.step_index + 1}/{len(snap.steps)}: {snap.step.value} ({snap.phase.value})")
    services = ", ".join(label_for(s) for s in snap.state.services) or "none"
    print(f"services: {services}")
    if snap.state.promo_codes:
        print(f"promo codes: {', '.join(snap.state.promo_codes)}")
    for message in (snap.validation_error, snap.promo_error, snap.promo_message, snap.submission_error):
        if message:
            print(f"! {message}")
    if snap.step is WizardStep.ANALYSIS and not wizard.is_analyzing:
        for i, offer in enumerate(snap.opportunities):
            print(f"  [{i}] {offer.title} ({offer.code})")
            print(f"      {offer.reason}")
            if offer.eligible_addons:
                print(f"      zones: {', '.join(offer.eligible_addons)}")


def _toggle(wizard: QuoteWizard, raw: str) -> None:
    service = ServiceType(raw)
    services = wizard.state.services
    if service in services:
        wizard.update({"services": tuple(s for s in services if s is not service)})
    else:
        wizard.update({"services": services + (service,)})


async def _handle(wizard: QuoteWizard, cmd: str, arg: str) -> None:
    if cmd == "next":
        wizard.next()
    elif cmd == "back":
        wizard.back()
    elif cmd == "toggle":
        _toggle(wizard, arg)
    elif cmd == "set":
        wizard.update(partial_from_dict(json.loads(arg)))
    elif cmd == "film":
        wizard.set_film_type(PPFFilmType(arg))
    elif cmd == "promo":
        wizard.apply_promo_code(arg)
    elif cmd == "unpromo":
        wizard.remove_promo_code(arg)
    elif cmd == "jump":
        wizard.jump_to_service(ServiceType(arg))
    elif cmd == "zone":
        wizard.select_free_addon(arg)
    elif cmd == "pick":
        wizard.select_upsell(int(arg))
    elif cmd == "state":
        print(json.dumps(quote_state_to_dict(wizard.state), indent=2))
    elif cmd == "submit":
        if await wizard.submit():
            print("Quote sent. We'll be in touch shortly.")
    elif cmd == "reset":
        wizard.start_over(confirmed=input("Discard this quote? [y/N] ").strip().lower() == "y")
    else:
        print(HELP)


async def main() -> None:
    loop = asyncio.get_running_loop()
    wizard = get_quote_wizard()
    print("\nLocal Quote Harness")
    print(HELP)
    _print_view(wizard)

    while True:
        try:
            line = (await loop.run_in_executor(None, input, "\n> ")).strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            # Empty input just refreshes the view (analysis may have finished).
            _print_view(wizard)
            continue
        cmd, _, arg = line.partition(" ")
        if cmd in ("quit", "exit"):
            break
        try:
            await _handle(wizard, cmd.lower(), arg.strip())
        except ValueError as e:
            print(f"Error: {e}")
        _print_view(wizard)

    await close_quote_wizard()
    print("Bye!")


if __name__ == "__main__":
    asyncio.run(main())
