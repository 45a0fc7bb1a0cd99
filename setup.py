from setuptools import setup, find_packages

setup(
    name='textgraph',
    version='1.0.0',
    description='Directed graph container with a line-oriented text format',
    packages=find_packages(include=['textgraph', 'textgraph.*']),
    package_data={
        'textgraph': ['data/*.tgf'],
    },
    install_requires=[
        'click>=8.1',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'textgraph = textgraph.cli:main',
        ],
    },
    python_requires='>=3.8',
)
