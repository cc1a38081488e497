from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()


setup(
    name='liftminer',
    version='1.0.0',
    description='Support, confidence and lift of frequently purchased items against a target item set',
    long_description=long_description,
    license='GNU',
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    install_requires=['pandas', 'numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
)
