"""Anonymize an event snapshot JSON file.

Replaces every participant and judge name with a fake one generated by faker
with a fixed seed, so shared example events are reproducible. Ids and scores
are left untouched.

Usage:
    python scripts/anonymize_event.py event.json
    python scripts/anonymize_event.py event.json -o anonymized.json
"""

import argparse
import json
from pathlib import Path

from faker import Faker

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"
DEFAULT_OUTPUT = FIXTURES_DIR / "event.json"

SEED = 20260201


def discover_names(event: dict) -> set[str]:
    """Collect all participant and judge names in the event."""
    names: set[str] = set()
    for key in ("participants", "students", "judges"):
        for person in event.get(key, []):
            if person.get("name"):
                names.add(person["name"])
    return names


def generate_fake_names(names: set[str], seed: int) -> dict[str, str]:
    """Generate a mapping of real names to distinct fake names.

    Names are processed in sorted order so the same input always gets the
    same replacements.
    """
    fake = Faker(["en_US", "en_GB", "de_DE", "fr_FR"])
    Faker.seed(seed)

    taken = {n.lower() for n in names}
    mapping: dict[str, str] = {}
    for name in sorted(names):
        fake_name = fake.name()
        while fake_name.lower() in taken:
            fake_name = fake.name()
        taken.add(fake_name.lower())
        mapping[name] = fake_name
    return mapping


def apply_replacements(event: dict, mapping: dict[str, str]) -> dict:
    """Return a copy of the event with participant and judge names replaced."""
    result = dict(event)
    for key in ("participants", "students", "judges"):
        if key in event:
            result[key] = [
                {**person, "name": mapping.get(person.get("name", ""), person.get("name", ""))}
                for person in event[key]
            ]
    return result


def main():
    parser = argparse.ArgumentParser(
        description="Anonymize an event snapshot JSON file")
    parser.add_argument("input", help="Path to the input JSON file")
    parser.add_argument("-o", "--output", default=str(DEFAULT_OUTPUT),
                        help=f"Output path (default: {DEFAULT_OUTPUT})")
    args = parser.parse_args()

    event = json.loads(Path(args.input).read_text(encoding="utf-8"))

    names = discover_names(event)
    print(f"Found {len(names)} unique names")

    mapping = generate_fake_names(names, SEED)
    for original, fake in sorted(mapping.items()):
        print(f"  {original} -> {fake}")

    result = apply_replacements(event, mapping)

    remaining = names & discover_names(result)
    if remaining:
        print(f"WARNING: {len(remaining)} names still found: {sorted(remaining)}")
    else:
        print("All names successfully replaced.")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(result, indent=2) + "\n", encoding="utf-8")
    print(f"Written to {output_path}")


if __name__ == "__main__":
    main()
