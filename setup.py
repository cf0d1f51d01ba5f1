from setuptools import setup, find_packages

setup(
    name="zoneditor",
    version="0.1.0",
    description="Save-state persistence and save-as dialog workflow for the zone editor",
    packages=find_packages(),
    package_data={
        "zoneditor": ["config.yaml"],
    },
    python_requires=">=3.8",
    install_requires=[
        "textual>=0.47.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
