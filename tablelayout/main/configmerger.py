from collections.abc import Mapping

import logging
logger = logging.getLogger(__name__)



class ConfigMerger:
    r"""
    Merges layered configuration objects (as loaded from YAML files, front
    matter, or command-line options).

    Objects given earlier in the list take precedence over those that come
    later, which provide defaults.  Dictionaries are merged recursively; lists
    and scalar values are taken from the first object that specifies them.
    """

    def recursive_assign_defaults(self, obj_list):
        return self.recursive_assign_defaults_dict(obj_list, [])

    def recursive_assign_defaults_dict(self, obj_list, property_path):

        result = {}

        for j, obj in enumerate(obj_list):
            if obj is None:
                continue

            if not isinstance(obj, Mapping):
                logger.warning(
                    "Incompatible config merge, ignoring value %r for ‘%s’ in chain %r",
                    obj, ".".join(property_path), obj_list
                )
                continue

            remaining_obj_list = obj_list[j+1:]

            for k, value in obj.items():

                if k in result:
                    # value is already set by an object with higher precedence
                    continue

                if isinstance(value, Mapping):
                    result[k] = self.recursive_assign_defaults_dict(
                        [value] + [
                            (o.get(k, None) if isinstance(o, Mapping) else None)
                            for o in remaining_obj_list
                        ],
                        property_path + [k],
                    )
                elif isinstance(value, list):
                    result[k] = list(value)
                else:
                    result[k] = value

        return result
