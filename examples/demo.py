"""
jsonrescue demonstration script.
"""

import logging

import jsonrescue
from jsonrescue import RecoveryError, StageTracker


def main():
    print("jsonrescue - LLM JSON Recovery Demo")
    print("=" * 36)

    examples = [
        # Already valid
        ('{"status": "ok", "count": 3}', "Valid JSON"),
        # Trailing commas and bare keys
        ("{name: 'Ada', langs: ['en', 'fr',],}", "Bare keys and trailing commas"),
        # Python repr
        ("{'enabled': True, 'fallback': None}", "Python literals"),
        # Comments
        ('{"port": 8080 /* default */} // server', "Comments"),
        # Chat prose around the payload
        (
            "Sure! Here is the result:\n```json\n{\"answer\": \"yes\"}\n```\nAnything else?",
            "JSON inside prose and a code fence",
        ),
        # Raw newline inside a string
        ('{"text": "line one\nline two"}', "Raw newline in a string"),
        # Nothing to recover
        ("I'm sorry, I can't help with that.", "No JSON at all"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text.strip()!r}")

        tracker = StageTracker()
        result = jsonrescue.recover(text, tracker=tracker)
        if result.ok:
            print(f"Output: {result.value}")
            print(f"Stage:  {result.stage.value}")
        else:
            print(f"Failed after {len(tracker.attempts)} attempt(s)")

    print(f"\n{len(examples) + 1}. Raising on failure")
    try:
        jsonrescue.loads("no data here")
    except RecoveryError as e:
        print(f"Error:  {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
