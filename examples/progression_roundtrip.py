#!/usr/bin/env python3
"""
Example: Progression YAML round-trip and analysis.

A progression is stored as (root, quality) pairs; loading it back rebuilds
identical chords. The analysis report then labels every chord.

Usage:
    python examples/progression_roundtrip.py
"""

import yaml

from chuk_mcp_harmony.analysis import analyze_progression
from chuk_mcp_harmony.models import Progression


def main() -> None:
    """Export, reload and analyze a progression."""
    progression = Progression.from_symbols(
        ["C", "Am", "Dm7", "G7", "C"], key="C_major", name="turnaround"
    )

    yaml_str = yaml.safe_dump(progression.to_yaml_dict(), sort_keys=False, allow_unicode=True)
    print("Stored progression:")
    print(yaml_str)

    reloaded = Progression.from_yaml_dict(yaml.safe_load(yaml_str))
    assert reloaded.all_chords() == progression.all_chords()
    print("Round-trip OK: chords rebuilt identically")
    print()

    analysis = analyze_progression(reloaded)
    for section in analysis.sections:
        print(f"Section {section.label}:")
        for chord, label, role in zip(
            section.chords, section.classical, section.syntactical, strict=True
        ):
            print(f"  {chord.symbol():5} {label.roman_numeral:5} {label.func.value}  {role.role.value}")

    rough = analysis.rough_transitions
    print(f"\nRough transitions: {rough or 'none'}")


if __name__ == "__main__":
    main()
