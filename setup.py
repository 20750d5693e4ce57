from pathlib import Path
from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    if not req_path.exists():
        return []
    return [line.strip() for line in req_path.read_text(encoding="utf-8").splitlines() if line.strip() and not line.startswith("#")]


setup(
    name="listing-compliance",
    version="0.1.0",
    description="NZ Fair Trading Act compliance checks for real-estate listing copy",
    packages=find_packages(include=["listing_compliance", "listing_compliance.*"]),
    py_modules=["listing_check"],
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24"],
    },
    entry_points={
        "console_scripts": [
            "listing-check=listing_check:main",
            "listing-compliance-api=listing_compliance.ui.server:main",
        ],
    },
    python_requires=">=3.10",
    include_package_data=True,
)
