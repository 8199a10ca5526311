from .example import run_example

if __name__ == "__main__":
    run_example()
