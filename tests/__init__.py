"""
toolbox Test Suite
"""

import os
import unittest

def run_all_tests():
    """Run all toolbox tests"""
    suite = unittest.TestLoader().discover(os.path.dirname(__file__), pattern='test_*.py')
    return unittest.TextTestRunner(verbosity=2).run(suite)

if __name__ == '__main__':
    run_all_tests()
