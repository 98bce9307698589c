from data_designer.plugins.plugin import Plugin, PluginType

eloquent_plugin = Plugin(
    config_qualified_name="eloquent.config.EloquentColumnConfig",
    impl_qualified_name="eloquent.generator.EloquentColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
