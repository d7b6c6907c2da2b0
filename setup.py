from setuptools import setup, find_packages

# Updated by a script (in the future maybe)
VERSION = "0.1.0-dev"

with open('README.md', 'r', encoding='utf-8') as f:
    readme = f.read()

setup(
    name='sixth',
    version=VERSION,
    packages=find_packages(exclude=('tests*',)),

    description='A small Forth-like stack language that counts in base 6',
    long_description=readme,
    long_description_content_type='text/markdown',
    license='MIT',
    keywords='forth stack language interpreter concatenative',
    python_requires='>=3.10',
    extras_require={
        'dev': [
            'pytest',
            'flake8',
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Interpreters",
    ],
    scripts=['.bin/sixth']
)
