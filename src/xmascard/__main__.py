from xmascard.run.card import app

if __name__ == "__main__":
    app()
