from setuptools import setup

# See setup.cfg for metadata, options, and setup tools.
setup()
