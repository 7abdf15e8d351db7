import tkinter as tk
from UIs.app import CalculatorApp


def main():
    try:
        print("[APP] Initializing GUI...")
        root = tk.Tk()
        app = CalculatorApp(root)
        print("[APP] GUI ready. Starting mainloop...")
        root.mainloop()
    except Exception as e:
        print("[APP] ERROR:", str(e))
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
