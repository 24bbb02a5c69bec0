from setuptools import setup, find_packages
setup(
    name="chained_hash",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "colorama"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["chash-wc=chained_hash.examples.word_count:main"]},
    python_requires=">=3.9",
)
