from bot.core import run


if __name__ == "__main__":
    run()
