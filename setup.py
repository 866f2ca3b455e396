import setuptools

setuptools.setup(
    name = 'polyspline',
    version = '1.0',
    description = 'cardinal spline sampling for vector path rendering',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy'],
    extras_require={
        'draw': ['celiagg'],
        'test': ['pytest', 'scipy'],
    },
)
