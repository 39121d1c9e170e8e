# ride_share/app/demo.py
from ride_share.app.build import build
from ride_share.app.report import render


def main() -> None:
    app = build()
    for line in render(app.book):
        print(line)


if __name__ == "__main__":
    main()
