from setuptools import setup, find_packages

setup(
    name="sudokugrid",
    version="1.0.0",
    description="Sudoku puzzle generator & backtracking solver for square grids with rectangular boxes",
    packages=find_packages(include=["sudokugrid", "sudokugrid.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0", "httpx>=0.24.0"],
        "gui": ["customtkinter>=5.2.0"],
    },
    entry_points={
        "console_scripts": [
            "sudokugrid=sudokugrid.cli:main",
            "sudokugrid-server=sudokugrid.server:main",
        ],
    },
)
