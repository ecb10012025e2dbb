from glob import glob
from setuptools import setup


setup(
    name='rpnexpr',
    version='0.1.0',
    description='RPN expression engine and calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpnexpr'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
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
