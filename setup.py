import os.path as op
import re
from setuptools import setup, find_packages

with open('requirements.txt') as rf:
    requirements = rf.readlines()

with open(op.join('skrank', '__init__.py')) as f:
    VERSION = re.search(r"__version__ = '(.*)'", f.read()).group(1)


def readme():
    with open('README.rst') as f:
        return f.read()

setup(
    name='skrank',
    version=VERSION,
    description='Outlier treatment, feature ranking and rank aggregation ' \
                'for two-class (neuroimaging) datasets.',
    long_description=readme(),
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Science/Research',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics'],
    keywords="feature ranking rank aggregation outliers machine learning",
    author='Lukas Snoek',
    author_email='lukassnoek@gmail.com',
    license='MIT',
    platforms='Linux',
    packages=find_packages(),
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    include_package_data=True,
    zip_safe=False)
