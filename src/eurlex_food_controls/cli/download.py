"""CLI entrypoint for downloading EUR-Lex HTML."""

from eurlex_food_controls.download.eurlex import main

if __name__ == "__main__":
    main()
