from setuptools import setup

setup(
    author='Jeffrey Finkelstein',
    author_email='jeffrey.finkelstein@gmail.com',
    #classifiers=[],
    description='A multinomial naive Bayes spam filter',
    entry_points={'console_scripts': ['nbfilter = nbfilter.cli:main']},
    extras_require={'test': ['pytest']},
    install_requires=['blinker', 'click', 'numpy'],
    #include_package_data=True,
    #keywords=[],
    #license='',
    #long_description='',
    name='nbfilter',
    platforms='any',
    packages=['nbfilter'],
    python_requires='>=3.4',
    url='http://github.com/jfinkels/nbfilter',
    version='0.0.1-dev',
    #zip_safe=False
)
