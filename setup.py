from setuptools import setup

setup(
    name='dociopts',
    version='0.1.0',
    author='DOCI-Exact developers',
    description='The option set of the DOCI-Exact/CheMPS2 solver and its documentation index.',
    long_description=
    'dociopts registers the options of the DOCI-Exact solver, checks them against Options.h, and reads, validates, and writes the Doxygen navigation index that documents them.',
    packages=['dociopts'],
    # tell setuptools that all packages will be under the '.' directory
    package_dir={'': '.'},
    package_data={'dociopts': ['options.yaml']},
    python_requires='>=3.8',
    install_requires=['pyyaml'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['dociopts=dociopts.__main__:main']},
    zip_safe=False
)
