from nrel.transport.custom_yaml.custom_yaml import custom_yaml
