from glob import glob
from setuptools import setup


setup(
    name='infixcalc',
    version='1.0.0',
    description='Interactive infix calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['infixcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.7',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
