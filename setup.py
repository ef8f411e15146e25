import setuptools

with open('README.md', 'rt') as f:
    long_description = f.read()

setuptools.setup(
    name='halffp',
    version='0.0.0',
    description='IEEE 754 binary16 (half precision) values, converted through native binary32',
    long_description=long_description,
    license='MIT',
    install_requires=['numpy>=1.23.0', 'gmpy2>=2.1.2', 'scipy>=1.8.0'],
    extras_require={
        'test': ['pytest'],
    },
    packages=['halffp', 'halffp/bits', 'halffp/arithmetic', 'halffp/tools'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
    ],
)
