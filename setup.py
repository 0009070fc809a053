import setuptools

with open("README.md", "r") as file_in:
    long_description = file_in.read()

setuptools.setup(
    name = 'bitga',  
    entry_points = {'console_scripts' : [
        'bitga = bitga.cli:main', 
        ]},
    install_requires = ['numpy','matplotlib','tqdm'],
    extras_require = {'test' : ['pytest']},
    version = "0.1.0",
    description = "A binary genetic algorithm evolving packed bit strings",
    keywords = "genetic algorithm one-max bit string",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    packages = setuptools.find_packages(exclude = ['tests']),
    classifiers = [
     "Development Status :: 3 - Alpha",
     "Programming Language :: Python :: 3",
     "Operating System :: OS Independent",
    ],
    )
