"""Allow ``python -m radix_tailwind``."""

from radix_tailwind.cli import main

if __name__ == "__main__":
    main()
