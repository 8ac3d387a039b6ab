"""Planning application module: plan and task mutations over the task store."""
