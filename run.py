import sys

if __name__ == "__main__":
    import traceback

    try:
        try:
            from scrambled_keypad.main import main
        except ImportError as e:
            print(f"CRITICAL: Could not import scrambled_keypad.main: {e}")
            sys.exit(1)

        if main():
            sys.exit(0)
        else:
            sys.exit(1)
    except Exception:
        traceback.print_exc()
        sys.exit(1)
