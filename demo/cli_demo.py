#!/usr/bin/env python3
"""
Interactive CLI demo for the creature importer.

Imports one creature file, binds what can be bound automatically and then
walks the remaining abilities one at a time.

Usage:
    CREATURE_CATALOG_PATH=catalog/ python demo/cli_demo.py wolf.json
"""
import asyncio
import json
import sys

from creature_importer import (
    CreatureImportApp,
    CreatureImportError,
    configure_logging,
    load_config_from_env,
)
from creature_importer.resolution import AmbiguousCandidates
from creature_importer.workflow import Abort, Assign, Presentation, Skip

HELP = "[Enter] accept  [1-9] pick  [k <skill>] change skill  [k] any skill  [s] skip  [a] abort"


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Creature Importer - Interactive CLI Demo")
    print("=" * 60 + "\n")


def print_presentation(presentation: Presentation, choices):
    ref = presentation.ref
    print(f"\n[{presentation.position}/{presentation.total}] {ref.kind.value} '{ref.name}' "
          f"(max level {ref.level_ceiling}, skill: {presentation.skill_filter or 'any'})")
    
    if presentation.preselected:
        print(f"  Suggested: {presentation.preselected.name}")
    else:
        print("  No suggestion")
    
    for number, entry in enumerate(choices[:9], start=1):
        print(f"  {number}. {entry.name} ({entry.skill or 'general'}, level {entry.level})")
    print(f"  {HELP}")


def choices_for(presentation: Presentation):
    """Candidates first, then the browse list for the current skill."""
    entries = []
    if isinstance(presentation.resolution, AmbiguousCandidates):
        entries.extend(c.entry for c in presentation.resolution.candidates)
    for entry in presentation.options:
        if entry.unique_id not in {e.unique_id for e in entries}:
            entries.append(entry)
    return entries


def make_driver(workflow):
    async def driver(presentation: Presentation):
        while True:
            choices = choices_for(presentation)
            print_presentation(presentation, choices)
            answer = (await asyncio.to_thread(input, "> ")).strip()
            
            if not answer and presentation.preselected:
                return Assign(presentation.preselected.unique_id)
            if answer.lower() == "s":
                return Skip()
            if answer.lower() == "a":
                return Abort()
            if answer.lower().startswith("k"):
                skill = answer[1:].strip() or None
                presentation = await workflow.requery(skill)
                continue
            if answer.isdigit() and 1 <= int(answer) <= min(len(choices), 9):
                return Assign(choices[int(answer) - 1].unique_id)
            
            print("  Unknown input")
    
    return driver


async def run(path: str) -> int:
    config = load_config_from_env()
    configure_logging(config.log_level)
    app = CreatureImportApp(config)
    
    result = app.normalize(app.load(path))
    print(result.summary.to_text())
    
    remaining = await app.auto_resolve(result.record)
    print(f"Bound automatically: {len(result.record.abilities)}, left for review: {len(remaining)}")
    
    workflow = app.start_workflow(result.record, remaining)
    try:
        report = await workflow.run(make_driver(workflow))
    finally:
        workflow.close()
    
    print(f"\nAssigned: {[item.entry.name for item in report.assigned]}")
    print(f"Left unresolved: {[ref.name for ref in report.skipped + report.discarded]}")
    
    plan = app.build_plan(result.record)
    print(json.dumps({"action": plan.action, "actor": plan.actor_data["name"], "items": len(plan.items)}, indent=2))
    return 0


def main():
    """Main CLI entry."""
    print_banner()
    if len(sys.argv) != 2:
        print("Usage: cli_demo.py <creature.json>")
        return 1
    
    try:
        return asyncio.run(run(sys.argv[1]))
    except CreatureImportError as e:
        print(f"\n❌ Import failed: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\n\n👋 Interrupted. Nothing was saved.\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
