from pathlib import Path
from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "nox", "ruff", "mypy<1"],
}

setup(
    name="pdfsvg",
    version="0.1.0",
    packages=["pdfsvg"],
    install_requires=[
        "charset-normalizer >= 2.0.0",
        "reportlab >= 3.6",
    ],
    extras_require=extras_require,
    description="Replays parsed SVG drawing calls onto a PDF canvas",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    keywords=[
        "svg",
        "pdf",
        "renderer",
        "vector graphics",
    ],
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
)
