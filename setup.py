import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='smz3-randomizer',
    version='1.0.0',
    description='The Super Metroid & A Link to the Past Combo Randomizer',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    install_requires=['flask', 'flask-expects-json', 'graphviz'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.7'
)
