"""
Header comment written at the top of every generated stylesheet.
"""

PROJECT_URL = "https://github.com/lilingxi01/radix-colors-tailwind"


def header_comment(version: str) -> str:
    """Build the fixed header comment block for a given package version."""
    return (
        "/**\n"
        " Radix Colors for Tailwind CSS\n"
        "\n"
        f" Version: {version}\n"
        "\n"
        f" To know more about this file, visit: {PROJECT_URL}\n"
        " */"
    )
