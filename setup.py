from setuptools import find_packages, setup

setup(
    name="mvp-creator",
    version="0.1.0",
    description="A tool for generating Model-View-Presenter boilerplate packages for Android projects",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'mvp-creator=mvp_creator.cli:cli',
        ],
    },
    python_requires=">=3.9",
)
