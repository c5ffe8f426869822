"""Basic usage example for dequeset."""

from dequeset import DequeSet, InvalidValueError


def main() -> None:
    """Demonstrate basic set operations."""
    print("=== Recently Used Files Example ===\n")

    recent = DequeSet.from_iterable(["setup.py", "core.py", "setup.py", "README.md"])
    print(f"Initial order: {recent.to_list()}")
    print(f"Size: {recent.size()}\n")

    # Touching a file moves it to the front
    touched = "README.md"
    recent.pop(touched)
    recent.push_front(touched)
    print(f"After touching {touched}: {recent.to_list()}")

    # Drop the least recently used entry
    evicted = recent.pop_back()
    print(f"Evicted: {evicted}")
    print(f"Now: {recent.to_list()}\n")

    # Stop early once a match is found
    def find_python(name: str) -> bool | None:
        if name.endswith(".py"):
            print(f"  First Python file: {name}")
            return False
        return None

    recent.each(find_python)

    print(f"Upper-cased: {recent.map(str.upper)}")
    print(f"Contains core.py: {'core.py' in recent}\n")

    try:
        recent.push_back(None)  # type: ignore[arg-type]
    except InvalidValueError as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()
