# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='algobench',
    version='0.1.0',
    description='A micro-benchmark harness for comparing algorithm versions',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['algobench', 'algobench.*']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['algobench=algobench.tools.bench_cli:main'],
    },
    zip_safe=False,
    python_requires='>=3.7',
)
