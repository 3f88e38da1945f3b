from setuptools import setup

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

PROJECT_NAME = "gce-operation-tracker"

setup(
    name=PROJECT_NAME,
    packages=["gce_operation_tracker"],
    package_dir={"": "src"},
    version="0.1",
    author="HURIDOCS",
    description="Waits for Google Compute Engine operations to finish",
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={"test": ["pytest", "httplib2"]},
    entry_points={"console_scripts": ["gce-operation-tracker=gce_operation_tracker.cli:main"]},
)
