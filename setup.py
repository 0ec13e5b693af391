from __future__ import print_function
from setuptools import setup

if __name__ == '__main__':
    setup(
        name='chart-constraints',
        version='0.1.0a0',
        description='Tree structured constraint sets for lexicalized chart parsing',
        author='Kilian Gebhardt',
        author_email='kilian.gebhardt@tu-dresden.de',

        license='GNU General Public License (GPL)',

        classifiers=[
            # How mature is this project? Common values are
            #   3 - Alpha
            #   4 - Beta
            #   5 - Production/Stable
            'Development Status :: 3 - Alpha',

            # Indicate who your project is intended for
            'Intended Audience :: Science/Research',
            'Topic :: Text Processing :: Linguistic',

            # Pick your license as you wish (should match "license" above)
            'License :: OSI Approved :: GNU General Public License (GPL)',

            'Programming Language :: Python :: 3'
        ],

        # What does your project relate to?
        keywords='parsing constraints treebank head rules chart parser',

        packages=['constraints', 'treebank'],
        install_requires=['nltk', 'plac'],
        extras_require={'test': ['pytest']},
    )
