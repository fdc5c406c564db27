import signal
import sys
from config import EnvironmentLoader
from control_service import PowerToolDemo

def signal_handler(sig, frame):
    print("\nShutting down...")
    sys.exit(0)

def wait_for_key():
    print("\nPress Enter to exit...")
    try:
        input()
    except EOFError:
        pass

def main():
    settings = EnvironmentLoader.load()
    try:
        signal.signal(signal.SIGINT, signal_handler)
        demo = PowerToolDemo()
        demo.run()
    except KeyboardInterrupt:
        print("\nShutting down...")
        return
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()

    if settings["wait_for_key"]:
        wait_for_key()

if __name__ == "__main__":
    main()
