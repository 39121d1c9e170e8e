# main.py
from ride_share.app.demo import main

if __name__ == "__main__":
    main()
