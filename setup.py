"""Module doscstring to make pylint STFU."""

import re
import setuptools

with open('README.md', 'r', encoding='utf-8') as reader:
    long_description = reader.read()

with open('formstack_api/__init__.py', 'r', encoding='utf-8') as reader:
    __version__ = re.search(r'^__version__ = "([^"]+)"', reader.read(), re.M).group(1)

packages = setuptools.find_packages(exclude=['tests', 'tests.*'])

setuptools.setup(
    name='formstack-api',
    version=__version__,
    description='A simple Formstack API v2 client for forms, fields and submissions.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=['requests', 'aiohttp', 'python-dateutil', 'pytz'],
    extras_require={
        'test': ['pytest'],
    },
    keywords=['python', 'formstack', 'api', 'automation', 'form', 'submission',
              'python3', 'rest', 'integration', 'client', 'asyncio'],
    classifiers=[
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Development Status :: 5 - Production/Stable',
        'Topic :: Utilities',
        'Typing :: Typed',
        'Operating System :: OS Independent',
    ],
    packages=packages,
    python_requires='>=3.9',
)
