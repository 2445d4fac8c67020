import os, sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.join(BASE_DIR, "src")
for p in (SRC_DIR, BASE_DIR):
    if p not in sys.path:
        sys.path.append(p)

from engine.app import GameApp

def main():
    app = GameApp(base_dir=BASE_DIR)
    app.run()

if __name__ == "__main__":
    main()
