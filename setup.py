#!/usr/bin/env python

from setuptools import setup

with open("README.md", "r", encoding="UTF-8") as f:
    readme = f.read()

with open("requirements.txt", "r", encoding="UTF-8") as f:
    requirements = f.read().splitlines()

setup(
    name='slurm_form',
    version='0.1.0',
    description='generate slurm batch submission scripts from job form values',
    long_description=readme,
    long_description_content_type="text/markdown",
    author='Joe Yesselman',
    author_email='jyesselm@unl.edu',
    url='https://github.com/jyesselm/slurm_form',
    packages=[
        'slurm_form',
        'slurm_form.script',
    ],
    package_dir={'slurm_form': 'slurm_form'},
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    keywords='slurm_form',
    classifiers=[
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    entry_points = {
        'console_scripts' : [
            'slurm-form=slurm_form.cli:cli',
        ]
    }
)
