import unittest

from tablelayout.main.configmerger import ConfigMerger

class TestRecursiveAssignDefaults(unittest.TestCase):

    maxDiff = None

    def test_simple(self):

        d = ConfigMerger().recursive_assign_defaults([
            {
                'id': 'goodvalue1',
            },
            {
                'id': 'value1',
                'class': 'value2',
            },
            {
                'key3': 'value3',
            },
        ])

        self.assertEqual(d, {
            'id': 'goodvalue1',
            'class': 'value2',
            'key3': 'value3'
        })

    def test_simple_recursive(self):

        d = ConfigMerger().recursive_assign_defaults([
            {
                'id': 'goodvalue1',
                'data': {
                    'a': 'AAA',
                    'b': 'BBB',
                },
                'html': {
                    'escape_cell_values': True,
                },
            },
            {
                'id': 'value1',
                'html': {
                    'missing_cell_value': '-',
                    'w': { 'one': 'W', 'two': 'WW' },
                },
            },
            {
                'key3': 'value3',
                'data': {
                    'b': "BBB-CCC",
                    'c': "CCC",
                },
                'html': {
                    'escape_cell_values': False,
                    'w': {
                        'two': { 'NN': 'WWNN' },
                        'three': 'WWW'
                    },
                },
            },
        ])

        self.assertEqual(d, {
            'id': 'goodvalue1',
            'key3': 'value3',
            'data': {
                'a': 'AAA',
                'b': 'BBB',
                'c': 'CCC',
            },
            'html': {
                'escape_cell_values': True,
                'missing_cell_value': '-',
                'w': {
                    'one': 'W',
                    'two': 'WW',
                    'three': 'WWW',
                },
            },
        })

    def test_none_objects(self):

        d = ConfigMerger().recursive_assign_defaults([
            None,
            {
                'tablelayout': None,
            },
            {
                'tablelayout': { 'use_cache': True },
            },
        ])

        self.assertEqual(d, {
            'tablelayout': None,
        })

    def test_lists_are_copied(self):

        items = ['x', 'y']
        d = ConfigMerger().recursive_assign_defaults([
            { 'k': items },
            { 'k': ['z'] },
        ])
        self.assertEqual(d, { 'k': ['x', 'y'] })
        self.assertFalse(d['k'] is items)

    def test_incompatible_ignored(self):

        with self.assertLogs('tablelayout.main.configmerger', level='WARNING'):
            d = ConfigMerger().recursive_assign_defaults([
                { 'data': { 'a': 'A' } },
                { 'data': 'not-a-mapping' },
            ])
        self.assertEqual(d, { 'data': { 'a': 'A' } })


if __name__ == '__main__':
    unittest.main()
