import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='raff',
    version='0.1.0',
    description='Lazy codec for RIFF chunk containers (WAV, AVI, ...).',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_namespace_packages(where="src", include=['raff*']),
    package_dir={"": "src"},
    install_requires=[
        'deal',
        'parse',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Multimedia :: Sound/Audio',
        'Topic :: Utilities'
    ],
    python_requires='>=3.8',
    keywords='riff wav avi chunk list parse serialize container'
)
