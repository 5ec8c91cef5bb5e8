from reqgen.cli import app

# python -m reqgen stage requirements/ out/
if __name__ == "__main__":
    app()
