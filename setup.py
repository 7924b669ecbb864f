from setuptools import find_packages, setup

setup(
    name="cuetree",
    version="0.1.0",
    description="Read CUE sheets into a disc, file and track tree",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"cuetree.cue": ["*.lark"]},
    install_requires=["lark>=1.1", "mutagen>=1.47"],
    extras_require={"test": ["pytest>=8"]},
    entry_points={"console_scripts": ["cuetree=cuetree.cli:main"]},
)
