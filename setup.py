from setuptools import setup
setup(
    name = "pyrestfolia",
    packages = ["pyrestfolia"],
    version = "0.0.1",
    description = "Navigate hypermedia JSON APIs as Python objects",
    python_requires = ">=3.8",
    install_requires = ['aiohttp', 'requests'],
    extras_require = {'test': ['pytest']},
)
